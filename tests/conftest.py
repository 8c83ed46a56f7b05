"""
tests/conftest.py
Shared roster and hall builders.
"""
import pytest
from exam_seating.models import Student, Hall


def build_students(*groups):
    """
    build_students(("CSE", 3), ("ECE", 2)) -> CSE01, CSE02, CSE03, ECE01, ECE02
    Ids run 1..n in the order given, like a roster sorted by (branch, roll).
    """
    students = []
    for branch, count in groups:
        for i in range(1, count + 1):
            students.append(Student(
                id=len(students) + 1,
                roll_no=f"{branch}{i:02d}",
                branch=branch,
                semester=3,
            ))
    return students


@pytest.fixture
def make_students():
    return build_students


@pytest.fixture
def two_halls():
    """HallA 2x2 and HallB 1x2, no blocked seats (6 seats in total)."""
    return [
        Hall(id="HA", rows=2, columns=2, capacity=4, name="Hall A"),
        Hall(id="HB", rows=1, columns=2, capacity=2, name="Hall B"),
    ]
