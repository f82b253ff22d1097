"""
Error taxonomy

Every fatal condition in the pipeline is one of these. The CLI is the only
place that turns them into a message and an exit code.
"""

from typing import Optional


class JogglError(Exception):
    """Base class for all pipeline failures."""

    exit_code = 1

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UsageError(JogglError):
    """Invalid command-line input, e.g. a malformed --date."""


class TransportError(JogglError):
    """Network failure or unusable response from Toggl or Jira."""

    def __init__(self, service: str, message: str, status_code: Optional[int] = None):
        super().__init__(f"{service}: {message}")
        self.service = service
        self.status_code = status_code


class PageLimitExceeded(JogglError):
    """The time report does not fit in a single page."""

    def __init__(self, total_count: int, per_page: int):
        super().__init__(
            f"You have too many entries for this date ({total_count}). "
            f"Joggl currently only supports a max of {per_page}"
        )
        self.total_count = total_count
        self.per_page = per_page


class ValidationError(JogglError):
    """One or more work items have no ticket id or more than one."""

    def __init__(self, items: list):
        super().__init__(
            f"There were {len(items)} issue(s) detected. Please resolve and try again"
        )
        self.items = items


class ReconciliationError(JogglError):
    """One or more resolved ids are missing in Jira or are not subtasks."""

    def __init__(self, outcomes: dict):
        self.outcomes = outcomes
        self.failures = {key: check for key, check in outcomes.items() if not check.ok}
        super().__init__(
            f"There were {len(self.failures)} issue(s) detected. Please resolve and try again"
        )


class SubmissionError(JogglError):
    """A work-log POST was not created; remaining items were not submitted."""

    def __init__(self, item, submitted: list, cause: Optional[Exception] = None):
        detail = f": {cause}" if cause else ""
        super().__init__(
            f"Failed to create work log for {item.resolved_id}{detail}. "
            f"{len(submitted)} work log(s) were created before the failure"
        )
        self.item = item
        self.submitted = submitted
        self.cause = cause
