"""Joggl - Post Toggl time entries to Jira as work-logs."""

__version__ = "0.1.0"

from .models import (
    RawTimeEntry,
    WorkItem,
    ValidatedWorkItem,
    IssueRecord,
    ItemStatus,
    IssueCheck,
    SubmissionResult,
)
from .extractor import extract_ids
from .aggregator import aggregate
from .reconciler import classify, cross_check, build_jql
from .submitter import Submitter

__all__ = [
    "RawTimeEntry",
    "WorkItem",
    "ValidatedWorkItem",
    "IssueRecord",
    "ItemStatus",
    "IssueCheck",
    "SubmissionResult",
    "extract_ids",
    "aggregate",
    "classify",
    "cross_check",
    "build_jql",
    "Submitter",
]
