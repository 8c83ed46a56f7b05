"""
exam_seating/hall_selector.py
Greedy hall selection: largest usable halls first until the roster fits.
"""

import logging
from typing import Hashable, Iterable, List, Mapping, Optional, Sequence

from .models import Hall, HallSelection, SelectedHall
from .utils import blocked_label_set

LOG = logging.getLogger(__name__)


def effective_capacity(hall: Hall, blocked_seats: Iterable[str] = ()) -> int:
    """Grid seats minus blocked seats. The declared hall capacity is ignored."""
    return hall.seat_count - len(blocked_label_set(blocked_seats))


def select_halls(halls: Sequence[Hall],
                 blocked_seats_by_hall: Optional[Mapping[Hashable, Iterable[str]]],
                 required_capacity: int) -> HallSelection:
    """
    Sorts halls by effective capacity (descending, ties keep input order)
    and takes them one by one until the running total covers
    `required_capacity`. The hall that crosses the line is taken whole.

    `sufficient` compares against every candidate hall, so callers must
    check it before using the selection.
    """
    blocked_seats_by_hall = blocked_seats_by_hall or {}

    candidates: List[SelectedHall] = []
    for hall in halls:
        blocked = blocked_label_set(blocked_seats_by_hall.get(hall.id))
        candidates.append(SelectedHall(
            hall=hall,
            effective_capacity=effective_capacity(hall, blocked),
            blocked_seats=blocked,
        ))

    # sorted() is stable, so equal capacities stay in caller order
    candidates = sorted(candidates, key=lambda c: c.effective_capacity, reverse=True)

    selected: List[SelectedHall] = []
    total_capacity = 0
    for candidate in candidates:
        if total_capacity >= required_capacity:
            break
        selected.append(candidate)
        total_capacity += candidate.effective_capacity

    available_capacity = sum(c.effective_capacity for c in candidates)

    LOG.info("Selected %d of %d halls: %d seats for %d students",
             len(selected), len(candidates), total_capacity, required_capacity)

    return HallSelection(
        selected_halls=tuple(selected),
        total_capacity=total_capacity,
        available_capacity=available_capacity,
        sufficient=available_capacity >= required_capacity,
    )
