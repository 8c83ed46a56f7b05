"""
exam_seating/models.py
Data records exchanged with the allocation engine.
"""

from typing import List, Dict, Optional, Tuple, Any, Hashable
from dataclasses import dataclass, field

MIN_SEMESTER = 1
MAX_SEMESTER = 8


@dataclass(frozen=True)
class Student:
    """
    A roster entry. The engine only reorders references to these,
    it never changes one.
    """
    id: Hashable
    roll_no: str
    branch: str
    semester: int
    name: str = ""

    def __post_init__(self):
        if not MIN_SEMESTER <= self.semester <= MAX_SEMESTER:
            raise ValueError(
                f"Student {self.roll_no}: semester {self.semester} is outside "
                f"{MIN_SEMESTER}-{MAX_SEMESTER}"
            )


@dataclass(frozen=True)
class Hall:
    """
    An exam hall laid out as a rows x columns grid.
    The declared capacity is informational; allocation trusts the grid.
    """
    id: Hashable
    rows: int
    columns: int
    capacity: Optional[int] = None
    name: str = ""
    building: str = ""
    is_active: bool = True

    def __post_init__(self):
        if self.rows < 1 or self.columns < 1:
            raise ValueError(
                f"Hall {self.id}: rows and columns must be at least 1 "
                f"(got {self.rows}x{self.columns})"
            )

    @property
    def seat_count(self) -> int:
        return self.rows * self.columns


@dataclass(frozen=True)
class SelectedHall:
    """A hall chosen by the hall selector, with its usable seat count."""
    hall: Hall
    effective_capacity: int
    blocked_seats: frozenset = frozenset()

    @property
    def id(self) -> Hashable:
        return self.hall.id


@dataclass(frozen=True)
class HallSelection:
    selected_halls: Tuple[SelectedHall, ...]
    total_capacity: int
    available_capacity: int
    sufficient: bool


@dataclass(frozen=True)
class Allocation:
    """One seat assignment: (student, hall, seat)."""
    student_id: Hashable
    hall_id: Hashable
    seat_label: str
    student: Student = field(compare=False, repr=False)

    def to_record(self) -> Dict[str, Any]:
        return {
            "student_id": self.student_id,
            "hall_id": self.hall_id,
            "seat_position": self.seat_label,
        }


@dataclass(frozen=True)
class AllocationSummary:
    total_students: int
    allocated_seats: int
    halls_used: int
    strategy: str


@dataclass(frozen=True)
class AllocationResult:
    """
    The full output of one allocation run.
    `allocations` keeps generation order, which the mixing score relies on.
    """
    allocations: Tuple[Allocation, ...]
    summary: AllocationSummary
    selected_halls: Tuple[SelectedHall, ...] = ()

    def mixing_score(self) -> int:
        from .scorer import branch_mixing_score
        return branch_mixing_score(self.allocations)

    def to_records(self) -> List[Dict[str, Any]]:
        return [a.to_record() for a in self.allocations]

    def get_selected_hall(self, hall_id: Hashable) -> SelectedHall:
        for selected in self.selected_halls:
            if selected.id == hall_id:
                return selected
        raise KeyError(hall_id)
