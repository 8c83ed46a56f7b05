"""
exam_seating
Seat allocation engine for examination halls.
"""

from .models import (Student, Hall, SelectedHall, HallSelection, Allocation,
                     AllocationSummary, AllocationResult)
from .exceptions import (AllocationError, NoStudentsFound, NoHallsAvailable,
                         InsufficientCapacity, UnknownStrategy, HallLayoutError,
                         DuplicateEntry)
from .seat_grid import SeatPattern, generate_seat_positions
from .partition import partition_by_branch
from .strategies import (Strategy, MixingStrategy, StrategyInfo, get_strategy,
                         list_strategies)
from .hall_selector import select_halls, effective_capacity
from .engine import AllocationEngine, allocate_seats
from .scorer import branch_mixing_score
from .stats import allocation_stats, allocations_to_frame, seating_chart

__version__ = "1.0.0"
