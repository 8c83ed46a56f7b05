"""
exam_seating/exceptions.py
Errors raised by the allocation engine. All of them are raised before any
allocation output is built, so a failed run never returns partial results.
"""


class AllocationError(Exception):
    """Base class for every allocation failure."""


class NoStudentsFound(AllocationError):
    def __init__(self):
        super().__init__("No students found for allocation")


class NoHallsAvailable(AllocationError):
    def __init__(self):
        super().__init__("No halls available for allocation")


class InsufficientCapacity(AllocationError):
    """Raised when every candidate hall together cannot seat the roster."""

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"Insufficient capacity. Students: {required}, Available seats: {available}"
        )


class UnknownStrategy(AllocationError, ValueError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown allocation strategy: '{name}'")


class HallLayoutError(AllocationError):
    """Raised for a hall grid that cannot be labelled (more than 26 rows)."""

    def __init__(self, hall_id, rows: int):
        self.hall_id = hall_id
        self.rows = rows
        owner = "Seat grid" if hall_id is None else f"Hall {hall_id}"
        super().__init__(
            f"{owner} has {rows} rows; seat labels only cover rows A-Z"
        )


class DuplicateEntry(AllocationError):
    """Raised when two students or two halls share an identifier."""

    def __init__(self, kind: str, key):
        self.kind = kind
        self.key = key
        super().__init__(f"Duplicate {kind}: '{key}'")
