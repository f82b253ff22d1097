"""
Reconciliation of work items against Jira

Two gates run before anything is written:
- classify: every item must reference exactly one ticket id
- cross_check: every referenced id must exist in Jira and be a subtask
"""

import logging
from typing import Iterable, Mapping

from .models import IssueCheck, IssueRecord, ItemStatus, ValidatedWorkItem, WorkItem

logger = logging.getLogger(__name__)


def classify_item(item: WorkItem) -> ValidatedWorkItem:
    """Classify a single item by how many candidate ids it carries."""
    count = len(item.candidate_ids)
    if count == 0:
        return ValidatedWorkItem(item=item, status=ItemStatus.NO_ID)
    if count == 1:
        return ValidatedWorkItem(item=item, status=ItemStatus.READY, resolved_id=item.candidate_ids[0])
    return ValidatedWorkItem(item=item, status=ItemStatus.MULTIPLE_IDS)


def classify(items: Iterable[WorkItem]) -> list[ValidatedWorkItem]:
    """Classify all items. Pure: no network access."""
    return [classify_item(item) for item in items]


def unresolved(validated: Iterable[ValidatedWorkItem]) -> list[ValidatedWorkItem]:
    """Items that block submission."""
    return [v for v in validated if not v.is_ready]


def unique_resolved_ids(validated: Iterable[ValidatedWorkItem]) -> list[str]:
    """Distinct resolved ids in first-seen order."""
    seen: dict[str, None] = {}
    for v in validated:
        if v.resolved_id and v.resolved_id not in seen:
            seen[v.resolved_id] = None
    return list(seen)


def build_jql(ids: Iterable[str]) -> str:
    """JQL selecting exactly the given issue keys, e.g. key in ("A-1","B-2")."""
    return 'key in ("' + '","'.join(ids) + '")'


def cross_check(ready_ids: Iterable[str], issues: Mapping[str, IssueRecord]) -> dict[str, IssueCheck]:
    """
    Check each resolved id against the issues returned by Jira.

    Args:
        ready_ids: distinct resolved ids of the READY items
        issues: issue key -> IssueRecord, from the JQL search

    Returns:
        id -> IssueCheck, in the order of ready_ids
    """
    outcomes: dict[str, IssueCheck] = {}
    for key in ready_ids:
        issue = issues.get(key)
        if issue is None:
            outcomes[key] = IssueCheck.NOT_FOUND
        elif not issue.is_subtask:
            outcomes[key] = IssueCheck.NOT_SUBTASK
        else:
            outcomes[key] = IssueCheck.FOUND
        logger.debug(f"{key}: {outcomes[key].value}")
    return outcomes


def under_one_second(validated: Iterable[ValidatedWorkItem]) -> list[ValidatedWorkItem]:
    """READY items whose total rounds down to 0 seconds; Jira rejects them."""
    return [v for v in validated if v.is_ready and v.total_duration_millis < 1000]
