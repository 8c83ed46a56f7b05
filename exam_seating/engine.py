"""
exam_seating/engine.py
The allocation engine: picks halls, mixes the roster and assigns seats.
"""

import logging
from typing import Hashable, Iterable, List, Mapping, Optional, Sequence, Union

from . import utils
from .utils import blocked_label_set
from .exceptions import (DuplicateEntry, HallLayoutError, InsufficientCapacity,
                         NoHallsAvailable, NoStudentsFound)
from .hall_selector import select_halls
from .models import (Allocation, AllocationResult, AllocationSummary, Hall,
                     Student)
from .seat_grid import generate_seat_positions
from .strategies import Strategy, get_strategy

LOG = logging.getLogger(__name__)


class AllocationEngine:
    """
    Runs one allocation from in-memory snapshots. Holds no state between
    runs and never modifies the lists it is given.
    """

    def __init__(self,
                 students: Sequence[Student],
                 halls: Sequence[Hall],
                 blocked_seats_by_hall: Optional[Mapping[Hashable, Iterable[str]]] = None,
                 strategy: Union[str, Strategy] = utils.DEFAULT_STRATEGY):
        self.strategy = get_strategy(strategy)
        self.students = list(students)
        self.halls = list(halls)
        # Materialize once so one-shot iterables survive both selection and seating
        self.blocked_seats_by_hall = {
            hall_id: blocked_label_set(labels)
            for hall_id, labels in (blocked_seats_by_hall or {}).items()
        }

    @staticmethod
    def _check_unique(kind, keys):
        seen = set()
        for key in keys:
            if key in seen:
                LOG.warning("Allocation aborted: duplicate %s %r", kind, key)
                raise DuplicateEntry(kind, key)
            seen.add(key)

    def _check_preconditions(self):
        if not self.students:
            LOG.warning("Allocation aborted: empty roster")
            raise NoStudentsFound()
        if not self.halls:
            LOG.warning("Allocation aborted: no halls")
            raise NoHallsAvailable()
        self._check_unique("student id", (s.id for s in self.students))
        self._check_unique("roll number", (s.roll_no for s in self.students))
        self._check_unique("hall id", (h.id for h in self.halls))
        for hall in self.halls:
            if hall.rows > utils.MAX_ROWS:
                LOG.warning("Allocation aborted: hall %s has %d rows", hall.id, hall.rows)
                raise HallLayoutError(hall.id, hall.rows)

    def run(self) -> AllocationResult:
        self._check_preconditions()

        # --- 1. Hall selection ---
        selection = select_halls(self.halls, self.blocked_seats_by_hall, len(self.students))
        if not selection.sufficient:
            LOG.warning("Allocation aborted: %d students, %d seats available",
                        len(self.students), selection.available_capacity)
            raise InsufficientCapacity(len(self.students), selection.available_capacity)

        # --- 2. Global mixing (per-hall strategies mix in step 3) ---
        if self.strategy.per_hall:
            roster = list(self.students)
        else:
            roster = self.strategy.apply(self.students)

        # --- 3. Seat assignment, hall by hall ---
        allocations: List[Allocation] = []
        halls_used = 0
        cursor = 0

        for selected in selection.selected_halls:
            if cursor >= len(roster):
                break
            hall = selected.hall

            if self.strategy.per_hall:
                end = cursor + selected.effective_capacity
                roster[cursor:end] = self.strategy.apply(roster[cursor:end], (hall.rows, hall.columns))

            positions = generate_seat_positions(
                hall.rows, hall.columns, selected.blocked_seats, self.strategy.seat_pattern
            )

            placed = 0
            for position, student in zip(positions, roster[cursor:]):
                allocations.append(Allocation(
                    student_id=student.id,
                    hall_id=hall.id,
                    seat_label=position,
                    student=student,
                ))
                placed += 1
            cursor += placed

            if placed:
                halls_used += 1
            LOG.info("Hall %s: seated %d of %d usable seats", hall.id, placed, len(positions))

        summary = AllocationSummary(
            total_students=len(self.students),
            allocated_seats=len(allocations),
            halls_used=halls_used,
            strategy=self.strategy.name.value,
        )
        LOG.info("Allocation complete (%s): %d students in %d halls",
                 summary.strategy, summary.allocated_seats, summary.halls_used)

        return AllocationResult(
            allocations=tuple(allocations),
            summary=summary,
            selected_halls=selection.selected_halls,
        )


def allocate_seats(students: Sequence[Student],
                   halls: Sequence[Hall],
                   blocked_seats_by_hall: Optional[Mapping[Hashable, Iterable[str]]] = None,
                   strategy: Union[str, Strategy] = utils.DEFAULT_STRATEGY) -> AllocationResult:
    """
    Allocates seats for `students` across `halls`.

    Raises (before building any output):
      UnknownStrategy       strategy is not alternate/row-based/snake/sequential
      NoStudentsFound       empty roster
      NoHallsAvailable      empty hall list
      DuplicateEntry        two students share an id or roll number, or two halls an id
      HallLayoutError       a hall has more rows than there are row letters
      InsufficientCapacity  all halls together cannot seat the roster
    """
    return AllocationEngine(students, halls, blocked_seats_by_hall, strategy).run()
