"""
Aggregation of raw time entries into work items

Entries sharing a (project, description) key are merged: durations are summed
and occurrences counted. Output keeps the order in which keys were first seen.
"""

from typing import Iterable

from .extractor import extract_ids
from .models import RawTimeEntry, WorkItem


def aggregate(entries: Iterable[RawTimeEntry]) -> list[WorkItem]:
    """
    Merge raw entries into work items.

    Args:
        entries: time entries of a single day

    Returns:
        One WorkItem per distinct (project_id, description), in first-seen order
    """
    items: dict[tuple, WorkItem] = {}

    for entry in entries:
        key = (entry.project_id, entry.description)
        item = items.get(key)
        if item is None:
            item = WorkItem(
                project=entry.project_name,
                description=entry.description,
                candidate_ids=extract_ids(entry.description),
            )
            items[key] = item

        item.total_duration_millis += entry.duration_millis
        item.occurrences += 1

    return list(items.values())


def total_duration(items) -> int:
    """Total milliseconds across work items."""
    return sum(item.total_duration_millis for item in items)
