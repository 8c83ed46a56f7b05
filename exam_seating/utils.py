"""
exam_seating/utils.py
Shared constants and seat-label helpers.
"""
import re
from typing import Tuple

# --- Seat Label Constants ---
ROW_LABEL_OFFSET: int = 64  # chr(64 + 1) == 'A'
MAX_ROWS: int = 26          # single-letter row labels only (A-Z)

SEAT_LABEL_PATTERN = re.compile(r'^([A-Z])(\d+)$')

# --- Allocation Defaults ---
DEFAULT_STRATEGY: str = "alternate"

# --- Seating Chart Markers ---
BLOCKED_MARKER: str = "X"
EMPTY_MARKER: str = ""


def row_label(row: int) -> str:
    """Returns the letter for a 1-based row index (1 -> 'A')."""
    if row < 1 or row > MAX_ROWS:
        raise ValueError(f"Row {row} is outside the labelled range 1-{MAX_ROWS}")
    return chr(ROW_LABEL_OFFSET + row)

def seat_label(row: int, column: int) -> str:
    return f"{row_label(row)}{column}"

def parse_seat_label(label: str) -> Tuple[int, int]:
    """
    Splits a label like 'C4' into (row, column) = (3, 4).
    Matching is exact: labels are upper-case with no padding, the same
    form the seat grid generates and compares against.
    Raises ValueError for anything that is not a letter followed by a number.
    """
    match = SEAT_LABEL_PATTERN.match(label)
    if not match:
        raise ValueError(f"Invalid seat label: '{label}'")
    row = ord(match.group(1)) - ROW_LABEL_OFFSET
    column = int(match.group(2))
    if column < 1:
        raise ValueError(f"Invalid seat label: '{label}'")
    return row, column

def blocked_label_set(labels) -> frozenset:
    """
    Blocked labels for one hall as a frozenset. A bare string is one label,
    not a sequence of characters.
    """
    if labels is None:
        return frozenset()
    if isinstance(labels, str):
        return frozenset([labels])
    return frozenset(labels)
