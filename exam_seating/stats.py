"""
exam_seating/stats.py
Tabular views of a finished allocation: per-hall and per-branch counts,
and the seat grid of a single hall.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Hashable, Sequence, Union

import pandas as pd

from . import utils
from .models import Allocation, AllocationResult
from .scorer import branch_mixing_score

LOG = logging.getLogger(__name__)

FRAME_COLUMNS = ["student_id", "roll_no", "branch", "hall_id", "seat_label", "row", "column"]


@dataclass
class HallStats:
    count: int = 0
    branches: Dict[str, int] = field(default_factory=dict)


@dataclass
class AllocationStats:
    by_hall: Dict[Hashable, HallStats]
    by_branch: Dict[str, int]
    branch_mixing_score: int


def _allocations_of(source: Union[AllocationResult, Sequence[Allocation]]) -> Sequence[Allocation]:
    if isinstance(source, AllocationResult):
        return source.allocations
    return source


def allocations_to_frame(source: Union[AllocationResult, Sequence[Allocation]]) -> pd.DataFrame:
    """One row per allocation, in generation order."""
    records = []
    for alloc in _allocations_of(source):
        row, column = utils.parse_seat_label(alloc.seat_label)
        records.append({
            "student_id": alloc.student_id,
            "roll_no": alloc.student.roll_no,
            "branch": alloc.student.branch,
            "hall_id": alloc.hall_id,
            "seat_label": alloc.seat_label,
            "row": row,
            "column": column,
        })
    return pd.DataFrame.from_records(records, columns=FRAME_COLUMNS)


def allocation_stats(source: Union[AllocationResult, Sequence[Allocation]]) -> AllocationStats:
    """
    Counts students per hall (with a branch breakdown) and per branch,
    plus the branch mixing score of the allocation order.
    """
    allocations = list(_allocations_of(source))
    df = allocations_to_frame(allocations)

    by_hall: Dict[Hashable, HallStats] = {}
    for hall_id, count in df.groupby("hall_id", sort=False).size().items():
        by_hall[hall_id] = HallStats(count=int(count))

    hall_branch_counts = df.groupby(["hall_id", "branch"], sort=False).size()
    for (hall_id, branch), count in hall_branch_counts.items():
        by_hall[hall_id].branches[branch] = int(count)

    by_branch = {
        branch: int(count)
        for branch, count in df.groupby("branch", sort=True).size().items()
    }

    return AllocationStats(
        by_hall=by_hall,
        by_branch=by_branch,
        branch_mixing_score=branch_mixing_score(allocations),
    )


def seating_chart(result: AllocationResult, hall_id: Hashable) -> pd.DataFrame:
    """
    The seat grid of one selected hall: rows indexed by letter, columns
    numbered from 1. Cells hold the seated roll number, BLOCKED_MARKER for
    a blocked seat, or EMPTY_MARKER for a free one.

    Raises KeyError if `hall_id` was not selected in this allocation.
    """
    selected = result.get_selected_hall(hall_id)
    hall = selected.hall

    chart = pd.DataFrame(
        utils.EMPTY_MARKER,
        index=pd.Index([utils.row_label(r) for r in range(1, hall.rows + 1)], name="row"),
        columns=pd.Index(list(range(1, hall.columns + 1)), name="column"),
        dtype=object,
    )

    for label in selected.blocked_seats:
        try:
            row, column = utils.parse_seat_label(label)
        except ValueError:
            LOG.debug("Ignoring unparseable blocked seat %r in hall %s", label, hall_id)
            continue
        if row <= hall.rows and column <= hall.columns:
            chart.at[utils.row_label(row), column] = utils.BLOCKED_MARKER

    for alloc in result.allocations:
        if alloc.hall_id != hall_id:
            continue
        row, column = utils.parse_seat_label(alloc.seat_label)
        chart.at[utils.row_label(row), column] = alloc.student.roll_no

    return chart
