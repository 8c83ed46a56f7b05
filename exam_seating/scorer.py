"""
exam_seating/scorer.py
"""

from typing import Sequence

from .models import Allocation


def count_mixed_pairs(allocations: Sequence[Allocation]) -> int:
    """Number of neighbouring allocations whose students are in different branches."""
    return sum(
        1 for previous, current in zip(allocations, allocations[1:])
        if previous.student.branch != current.student.branch
    )


def branch_mixing_score(allocations: Sequence[Allocation]) -> int:
    """
    Percentage (0-100) of adjacent allocation pairs with different branches.

    Adjacency is position in the flat list as generated, so the last seat of
    one hall and the first seat of the next count as a pair. Fewer than two
    allocations score 100.
    """
    allocations = list(allocations)
    pairs = len(allocations) - 1
    if pairs < 1:
        return 100
    # round half up: floor(100 * mixed / pairs + 0.5)
    return (200 * count_mixed_pairs(allocations) + pairs) // (2 * pairs)
