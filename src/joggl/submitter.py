"""
Sequential work-log submission

Items are posted one at a time, front to back. The first failure stops the run;
already created work-logs are left in place and nothing is retried.

State machine:
    IDLE -> CONFIRMING -> SUBMITTING(i) -> SUBMITTING(i+1) | FAILED | DONE
    CONFIRMING -> CANCELLED when the user declines
"""

import logging
from collections import deque
from enum import Enum
from typing import Optional

from .aggregator import total_duration
from .errors import JogglError
from .models import SubmissionResult, ValidatedWorkItem, WorklogPayload
from .ui import UI, format_duration

logger = logging.getLogger(__name__)


class SubmitterState(str, Enum):
    IDLE = "idle"
    CONFIRMING = "confirming"
    SUBMITTING = "submitting"
    DONE = "done"
    FAILED = "failed"
    CANCELLED = "cancelled"


TERMINAL_STATES = {SubmitterState.DONE, SubmitterState.FAILED, SubmitterState.CANCELLED}


class Submitter:
    """Posts validated work items to Jira"""

    def __init__(self, jira, ui: UI, date: str):
        """
        Args:
            jira: client exposing add_worklog(WorklogPayload)
            ui: prompt/report collaborator
            date: target day, YYYY-MM-DD
        """
        self.jira = jira
        self.ui = ui
        self.date = date
        self.state = SubmitterState.IDLE
        self.position: Optional[int] = None

    def _transition(self, state: SubmitterState, position: Optional[int] = None):
        logger.debug(f"Submitter {self.state.value} -> {state.value} ({position})")
        self.state = state
        self.position = position

    def confirm(self, items: list[ValidatedWorkItem]) -> bool:
        """Ask the user before any work-log is written."""
        self._transition(SubmitterState.CONFIRMING)
        self.ui.report("")
        self.ui.report(
            f"Joggl is about to create {len(items)} work log(s) with a total time of "
            f"{format_duration(total_duration(items))}."
        )
        return self.ui.confirm("Are you sure?")

    def submit_all(self, items: list[ValidatedWorkItem]) -> SubmissionResult:
        """
        Confirm, then submit every item in order.

        Returns:
            SubmissionResult with the submitted items and, on failure, the
            failing item and its error
        """
        if self.state is not SubmitterState.IDLE:
            raise RuntimeError(f"Submitter already used (state: {self.state.value})")

        not_ready = [v for v in items if not v.is_ready]
        if not_ready:
            raise ValueError(f"{len(not_ready)} item(s) are not ready for submission")

        if not self.confirm(items):
            self._transition(SubmitterState.CANCELLED)
            return SubmissionResult(cancelled=True)

        result = SubmissionResult()
        queue = deque(items)
        index = 0

        while queue:
            item = queue.popleft()
            self._transition(SubmitterState.SUBMITTING, index)

            payload = WorklogPayload.for_item(item, self.date)
            self.ui.report("")
            self.ui.report(
                f"Adding {payload.time_spent_seconds} seconds to {payload.issue_key} on {payload.started}"
            )

            try:
                self.jira.add_worklog(payload)
            except JogglError as e:
                self.ui.report("    Failed", "error")
                logger.info(f"Work log for {payload.issue_key} failed, {len(queue)} item(s) left unsubmitted")
                self._transition(SubmitterState.FAILED, index)
                result.failed = item
                result.error = e
                return result

            self.ui.report("    Done", "success")
            result.submitted.append(item)
            index += 1

        self._transition(SubmitterState.DONE)
        return result
