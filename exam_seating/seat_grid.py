"""
exam_seating/seat_grid.py
Generates the ordered list of assignable seat labels for one hall.
"""

from enum import Enum
from typing import Iterable, List, Optional

from . import utils
from .exceptions import HallLayoutError


class SeatPattern(str, Enum):
    NORMAL = "normal"
    SNAKE = "snake"


def generate_seat_positions(rows: int,
                            columns: int,
                            blocked: Optional[Iterable[str]] = None,
                            pattern: SeatPattern = SeatPattern.NORMAL) -> List[str]:
    """
    Walks the grid row by row (A1, A2, ... B1, B2, ...), leaving out any
    label found in `blocked`. Blocked seats are dropped, never shifted.

    With the SNAKE pattern every even row is reversed after its blocked
    seats have been removed, so the walk goes A1-A2-A3 then B3-B2-B1.
    """
    if rows > utils.MAX_ROWS:
        raise HallLayoutError(None, rows)

    blocked_set = utils.blocked_label_set(blocked)
    pattern = SeatPattern(pattern)
    seats: List[str] = []

    for row in range(1, rows + 1):
        row_seats = []
        for col in range(1, columns + 1):
            position = utils.seat_label(row, col)
            if position in blocked_set:
                continue
            row_seats.append(position)

        if pattern == SeatPattern.SNAKE and row % 2 == 0:
            row_seats.reverse()

        seats.extend(row_seats)

    return seats
