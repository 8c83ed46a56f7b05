"""
tests/test_seat_grid.py

Unit tests for seat label helpers and seat position generation.
Requires 'pytest' to run.
"""
import pytest
from exam_seating.seat_grid import generate_seat_positions, SeatPattern
from exam_seating.exceptions import HallLayoutError
from exam_seating.utils import row_label, seat_label, parse_seat_label


def test_row_labels():
    """Rows 1-26 map to A-Z; anything outside raises ValueError."""
    assert row_label(1) == "A"
    assert row_label(26) == "Z"
    assert seat_label(3, 4) == "C4"

    with pytest.raises(ValueError):
        row_label(27)
    with pytest.raises(ValueError):
        row_label(0)

def test_parse_seat_label():
    """Labels split into (row, column); malformed labels raise ValueError."""
    assert parse_seat_label("C4") == (3, 4)
    assert parse_seat_label("Z26") == (26, 26)

    # Labels are matched exactly, the way the grid generates them
    for bad in ["", "4C", "AA1", "B0", "C", "a12", " C4"]:
        with pytest.raises(ValueError):
            parse_seat_label(bad)

def test_normal_pattern_is_row_major():
    """The normal pattern walks each row left to right, top to bottom."""
    seats = generate_seat_positions(2, 3)
    assert seats == ["A1", "A2", "A3", "B1", "B2", "B3"]

def test_blocked_seats_are_skipped_not_shifted():
    """A blocked seat simply never appears; its neighbours keep their labels."""
    seats = generate_seat_positions(1, 3, {"A2"})
    assert seats == ["A1", "A3"]

def test_snake_pattern_reverses_even_rows():
    """Snake reverses rows 2, 4, ... and leaves odd rows alone."""
    seats = generate_seat_positions(2, 3, set(), SeatPattern.SNAKE)
    assert seats == ["A1", "A2", "A3", "B3", "B2", "B1"]

    # Third row goes left to right again
    seats = generate_seat_positions(3, 2, None, "snake")
    assert seats == ["A1", "A2", "B2", "B1", "C1", "C2"]

def test_snake_reverses_after_blocking():
    """Blocked seats are removed before an even row is reversed."""
    seats = generate_seat_positions(2, 3, {"B1", "A3"}, SeatPattern.SNAKE)
    assert seats == ["A1", "A2", "B3", "B2"]

def test_empty_grid():
    """Zero rows or zero columns give no seats."""
    assert generate_seat_positions(0, 5) == []
    assert generate_seat_positions(4, 0) == []

def test_fresh_list_every_call():
    """Changing a returned list does not affect later calls."""
    first = generate_seat_positions(1, 2)
    first.append("Z9")
    assert generate_seat_positions(1, 2) == ["A1", "A2"]

def test_rows_beyond_alphabet_rejected():
    """A 27th row has no letter and is rejected."""
    with pytest.raises(HallLayoutError):
        generate_seat_positions(27, 1)

def test_blocked_labels_match_exactly():
    """A lower-case blocked label does not match the upper-case seat."""
    assert generate_seat_positions(1, 3, {"a2"}) == ["A1", "A2", "A3"]

def test_string_blocked_value_is_one_label():
    """A bare string blocks the one seat it names."""
    assert generate_seat_positions(1, 3, "A2") == ["A1", "A3"]
    # Not its characters: "A" and "2" are not seats
    assert generate_seat_positions(1, 3, "A12") == ["A1", "A2", "A3"]
