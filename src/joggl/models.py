"""
Data models

Time entries flow through these types in one direction:
RawTimeEntry -> WorkItem -> ValidatedWorkItem -> WorklogPayload.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


COMMENT_SUFFIX = " \n\n(Imported via Joggl)"


@dataclass(frozen=True)
class RawTimeEntry:
    """One tracked interval from the Toggl detailed report"""
    project_id: Optional[int]
    project_name: str
    description: str
    duration_millis: int

    @classmethod
    def from_report_row(cls, row: dict) -> "RawTimeEntry":
        """Build an entry from a `data[]` row of the details report."""
        return cls(
            project_id=row.get("pid"),
            project_name=row.get("project") or "",
            description=row.get("description") or "",
            duration_millis=int(row.get("dur") or 0),
        )


@dataclass
class WorkItem:
    """All entries sharing one (project, description) key"""
    project: str
    description: str
    candidate_ids: list[str] = field(default_factory=list)
    total_duration_millis: int = 0
    occurrences: int = 0


class ItemStatus(str, Enum):
    READY = "Ready"
    NO_ID = "No Jira Id"
    MULTIPLE_IDS = "Multiple Jira Ids"


@dataclass
class ValidatedWorkItem:
    """A work item after local classification"""
    item: WorkItem
    status: ItemStatus
    resolved_id: Optional[str] = None

    @property
    def project(self) -> str:
        return self.item.project

    @property
    def description(self) -> str:
        return self.item.description

    @property
    def candidate_ids(self) -> list[str]:
        return self.item.candidate_ids

    @property
    def total_duration_millis(self) -> int:
        return self.item.total_duration_millis

    @property
    def occurrences(self) -> int:
        return self.item.occurrences

    @property
    def is_ready(self) -> bool:
        return self.status is ItemStatus.READY


@dataclass(frozen=True)
class IssueRecord:
    """Jira issue as returned by the search endpoint"""
    key: str
    is_subtask: bool

    @classmethod
    def from_search_result(cls, issue: dict) -> "IssueRecord":
        issuetype = (issue.get("fields") or {}).get("issuetype") or {}
        return cls(key=issue["key"], is_subtask=bool(issuetype.get("subtask")))


class IssueCheck(str, Enum):
    FOUND = "Found"
    NOT_FOUND = "Doesn't exist"
    NOT_SUBTASK = "Not a subtask"

    @property
    def ok(self) -> bool:
        return self is IssueCheck.FOUND


@dataclass
class WorklogPayload:
    """Body of one Jira work-log POST"""
    issue_key: str
    comment: str
    time_spent_seconds: int
    started: str

    @classmethod
    def for_item(cls, item: ValidatedWorkItem, date: str) -> "WorklogPayload":
        # Jira expects ISO 8601: 2025-12-31T00:00:00.000+0000
        return cls(
            issue_key=item.resolved_id,
            comment=item.description + COMMENT_SUFFIX,
            time_spent_seconds=item.total_duration_millis // 1000,
            started=f"{date}T00:00:00.000+0000",
        )

    def to_json(self) -> dict:
        return {
            "comment": self.comment,
            "timeSpentSeconds": self.time_spent_seconds,
            "started": self.started,
        }


@dataclass
class SubmissionResult:
    """Outcome of a submission run"""
    submitted: list[ValidatedWorkItem] = field(default_factory=list)
    failed: Optional[ValidatedWorkItem] = None
    error: Optional[Exception] = None
    cancelled: bool = False

    @property
    def ok(self) -> bool:
        return self.failed is None and not self.cancelled
