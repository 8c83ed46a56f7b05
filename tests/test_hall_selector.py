"""
tests/test_hall_selector.py

Unit tests for greedy hall selection.
Requires 'pytest' to run.
"""
import pytest
from exam_seating.models import Hall
from exam_seating.hall_selector import select_halls, effective_capacity


@pytest.fixture
def halls():
    return [
        Hall(id="H1", rows=2, columns=2, capacity=40),  # declared capacity is ignored
        Hall(id="H2", rows=1, columns=3),
        Hall(id="H3", rows=3, columns=1),
    ]

@pytest.fixture
def blocked():
    return {"H1": ["A1", "B2"]}


def test_effective_capacity_uses_grid(halls, blocked):
    """Effective capacity is rows x columns minus distinct blocked labels."""
    assert effective_capacity(halls[0], blocked["H1"]) == 2
    assert effective_capacity(halls[1]) == 3
    # Duplicate labels only block one seat
    assert effective_capacity(halls[0], ["A1", "A1"]) == 3

def test_string_blocked_value_is_one_label(halls):
    """A plain string counts as a single blocked seat."""
    assert effective_capacity(halls[1], "A2") == 2

    selection = select_halls(halls, {"H2": "A2"}, 9)
    h2 = [s for s in selection.selected_halls if s.id == "H2"][0]
    assert h2.blocked_seats == frozenset({"A2"})
    assert h2.effective_capacity == 2

def test_largest_halls_first_with_stable_ties(halls, blocked):
    """Largest halls come first; equal halls keep their input order."""
    selection = select_halls(halls, blocked, 4)

    # H2 and H3 tie on 3 seats and keep input order; H1 (2 seats) is not needed
    assert [s.id for s in selection.selected_halls] == ["H2", "H3"]
    assert selection.total_capacity == 6
    assert selection.available_capacity == 8
    assert selection.sufficient

def test_crossing_hall_included_whole(halls, blocked):
    """The hall that covers the remaining students is taken in full."""
    selection = select_halls(halls, blocked, 7)
    assert [s.id for s in selection.selected_halls] == ["H2", "H3", "H1"]
    assert selection.total_capacity == 8
    assert selection.sufficient

def test_exact_fit_stops(halls):
    """Selection stops as soon as the running total reaches the roster size."""
    selection = select_halls(halls, None, 4)
    # H1 has 4 seats without blocks and is first by capacity
    assert [s.id for s in selection.selected_halls] == ["H1"]
    assert selection.total_capacity == 4

def test_insufficient_capacity(halls, blocked):
    """Too few seats overall still returns every hall, flagged as insufficient."""
    selection = select_halls(halls, blocked, 20)
    assert not selection.sufficient
    assert len(selection.selected_halls) == 3
    assert selection.total_capacity == 8

def test_selected_hall_carries_blocked_set(halls, blocked):
    """A selected hall keeps its blocked labels and its own Hall record."""
    selection = select_halls(halls, blocked, 8)
    h1 = [s for s in selection.selected_halls if s.id == "H1"][0]
    assert h1.blocked_seats == frozenset({"A1", "B2"})
    assert h1.effective_capacity == 2
    assert h1.hall is halls[0]
