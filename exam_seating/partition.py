"""
exam_seating/partition.py
"""

from typing import Dict, Iterable, List

from .models import Student


def partition_by_branch(students: Iterable[Student]) -> Dict[str, List[Student]]:
    """
    Groups students by branch code. Keys come out in sorted order and each
    group keeps the order the students arrived in.
    """
    groups: Dict[str, List[Student]] = {}
    for student in students:
        groups.setdefault(student.branch, []).append(student)

    return {branch: groups[branch] for branch in sorted(groups)}
