"""
exam_seating/strategies.py
Branch mixing strategies. Each one takes a roster and returns a new list
in the order students should be seated.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple, Type, Union

from .exceptions import UnknownStrategy
from .models import Student
from .partition import partition_by_branch
from .seat_grid import SeatPattern

LOG = logging.getLogger(__name__)

# (rows, columns) of the hall a per-hall strategy is mixing for
HallLayout = Tuple[int, int]


class Strategy(str, Enum):
    ALTERNATE = "alternate"
    ROW_BASED = "row-based"
    SNAKE = "snake"
    SEQUENTIAL = "sequential"


class MixingStrategy(ABC):
    """
    Base class for a mixing strategy.

    `seat_pattern` is the seat traversal the engine should use with this
    ordering, and `per_hall` tells the engine to call `apply` once per hall
    with that hall's layout instead of once for the whole roster.
    """
    name: Strategy
    title: str = ""
    description: str = ""
    recommended: bool = False
    seat_pattern: SeatPattern = SeatPattern.NORMAL
    per_hall: bool = False

    @abstractmethod
    def apply(self, students: Sequence[Student],
              layout: Optional[HallLayout] = None) -> List[Student]:
        """Returns a new list with `students` in seating order."""

    def __repr__(self):
        return f"{type(self).__name__}()"


class AlternateMixing(MixingStrategy):
    """Round-robin over branches: CSE, ECE, MECH, CSE, ECE, MECH, ..."""
    name = Strategy.ALTERNATE
    title = "Alternate Branch Mixing"
    description = ("Students from different branches are placed alternately "
                   "(CSE -> ECE -> MECH -> CSE...)")
    recommended = True

    def apply(self, students, layout=None):
        groups = list(partition_by_branch(students).values())
        mixed: List[Student] = []

        index = 0
        has_more = True
        while has_more:
            has_more = False
            for group in groups:
                if index < len(group):
                    mixed.append(group[index])
                    has_more = True
            index += 1

        LOG.debug("Alternate mixing over %d branches, %d students", len(groups), len(mixed))
        return mixed


class RowBasedMixing(MixingStrategy):
    """
    One branch per grid row, rotating branches row by row. A branch that
    runs out leaves its row short; whatever is left over once every row
    has had its turn goes at the end, in branch order.
    """
    name = Strategy.ROW_BASED
    title = "Row-Based Mixing"
    description = "Each row gets students from one branch, rows alternate between branches"
    per_hall = True

    def apply(self, students, layout=None):
        if layout is None:
            raise ValueError("Row-based mixing needs the hall layout (rows, columns)")
        rows, columns = layout

        groups = partition_by_branch(students)
        branches = list(groups)
        if not branches:
            return []

        queues = {branch: list(group) for branch, group in groups.items()}
        mixed: List[Student] = []

        for row in range(rows):
            branch_students = queues[branches[row % len(branches)]]
            take = min(columns, len(branch_students))
            mixed.extend(branch_students[:take])
            del branch_students[:take]

        # Short rows leave students behind
        for branch in branches:
            mixed.extend(queues[branch])

        return mixed


class SnakeMixing(AlternateMixing):
    """Alternate ordering, seated in snake order (even rows reversed)."""
    name = Strategy.SNAKE
    title = "Snake Pattern"
    description = "Branch mixing with snake pattern seating (alternate row directions)"
    recommended = False
    seat_pattern = SeatPattern.SNAKE


class SequentialMixing(MixingStrategy):
    """No mixing: plain roll number order."""
    name = Strategy.SEQUENTIAL
    title = "Sequential"
    description = "Simple allocation by roll number order (no mixing)"

    def apply(self, students, layout=None):
        return sorted(students, key=lambda s: s.roll_no)


STRATEGIES: Dict[Strategy, Type[MixingStrategy]] = {
    Strategy.ALTERNATE: AlternateMixing,
    Strategy.ROW_BASED: RowBasedMixing,
    Strategy.SNAKE: SnakeMixing,
    Strategy.SEQUENTIAL: SequentialMixing,
}


def get_strategy(name: Union[str, Strategy]) -> MixingStrategy:
    """
    Looks up a strategy by enum member or by its string value
    ('alternate', 'row-based', 'snake', 'sequential').
    Anything else raises UnknownStrategy.
    """
    try:
        key = Strategy(name)
    except ValueError:
        raise UnknownStrategy(name) from None
    return STRATEGIES[key]()


@dataclass(frozen=True)
class StrategyInfo:
    id: str
    title: str
    description: str
    recommended: bool


def list_strategies() -> List[StrategyInfo]:
    """Every available strategy with its display details, in enum order."""
    return [
        StrategyInfo(
            id=key.value,
            title=cls.title,
            description=cls.description,
            recommended=cls.recommended,
        )
        for key, cls in STRATEGIES.items()
    ]
