"""
Toggl -> Jira pipeline

fetch report -> aggregate -> classify -> search issues -> cross-check ->
confirm -> submit. Every validation step runs to completion and reports all
problems before anything is written. Failures are raised as JogglError; the
CLI maps them to exit codes.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .aggregator import aggregate
from .config import Config, TOGGL_TOKEN_HELP, TOGGL_WORKSPACE_HELP
from .errors import ReconciliationError, SubmissionError, ValidationError
from .jira_api import JiraClient
from .reconciler import (
    build_jql, classify, cross_check, under_one_second, unique_resolved_ids, unresolved
)
from .submitter import Submitter
from .toggl_api import TogglClient
from .ui import UI, format_duration

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    DONE = "done"
    NOTHING_TO_REPORT = "nothing_to_report"
    CANCELLED = "cancelled"


@dataclass
class Options:
    """Values given on the command line; None means ask"""
    date: str
    api_token: Optional[str] = None
    workspace: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None


def _ask_until_answered(ask, prompt: str) -> str:
    value = ""
    while not value:
        value = ask(prompt).strip()
    return value


def resolve_toggl_credentials(options: Options, ui: UI) -> tuple[str, str]:
    """Return (api_token, workspace_id), asking for whichever is missing."""
    api_token = options.api_token
    if not api_token:
        ui.report(f"Missing Toggl API Token. Get it from {TOGGL_TOKEN_HELP}", "warning")
        api_token = _ask_until_answered(ui.ask, "API Token")

    workspace = options.workspace
    if not workspace:
        ui.report(f"Missing Toggl Workspace Id. Get it from {TOGGL_WORKSPACE_HELP}", "warning")
        workspace = _ask_until_answered(ui.ask, "Workspace Id")

    return api_token, workspace


def resolve_jira_credentials(options: Options, ui: UI) -> tuple[str, str]:
    """Return (username, password), asking for whichever is missing."""
    username = options.username or _ask_until_answered(ui.ask, "Jira Username")
    password = options.password or _ask_until_answered(ui.ask_password, "Jira Password")
    return username, password


def run(options: Options, ui: UI, config: Optional[Config] = None) -> Outcome:
    """
    Run the whole workflow for one day.

    Raises:
        TransportError, PageLimitExceeded, ValidationError,
        ReconciliationError, SubmissionError
    """
    config = config or Config()

    api_token, workspace = resolve_toggl_credentials(options, ui)
    toggl = TogglClient(config.toggl_url, api_token, timeout=config.request_timeout,
                        user_agent=config.user_agent)

    ui.report(f"Fetching the Toggl report for {options.date}")
    ui.report(f"API Request: [GET] {toggl.report_url()}")
    report = toggl.fetch_report(workspace, options.date)

    ui.report(f"Found {len(report.entries)} item(s). Mapping data", "success")
    items = aggregate(report.entries)
    if not items:
        ui.report(f"There are no items to report for {options.date}")
        return Outcome.NOTHING_TO_REPORT

    validated = classify(items)
    ui.show_items(validated)

    too_short = under_one_second(validated)
    problems = unresolved(validated) + too_short
    if problems:
        for v in problems:
            ids = ", ".join(v.candidate_ids) or "-"
            reason = "Less than one second" if v in too_short else v.status.value
            ui.report(
                f"{reason}: {v.description!r} (ids: {ids}, count: {v.occurrences}, "
                f"duration: {format_duration(v.total_duration_millis)})",
                "error",
            )
        raise ValidationError(problems)

    ids = unique_resolved_ids(validated)
    jql = build_jql(ids)
    ui.report(f"Verifying existence of issues matching JQL: {jql}")

    username, password = resolve_jira_credentials(options, ui)
    jira = JiraClient(config.jira_url, username, password, timeout=config.request_timeout)
    issues = jira.search_issues(jql, max_results=len(ids))

    outcomes = cross_check(ids, issues)
    for key, check in outcomes.items():
        ui.report(f"{key}: {check.value}", "success" if check.ok else "error")
    if not all(check.ok for check in outcomes.values()):
        raise ReconciliationError(outcomes)

    submitter = Submitter(jira, ui, options.date)
    result = submitter.submit_all(validated)
    if result.cancelled:
        ui.report("Nothing was submitted")
        return Outcome.CANCELLED
    if not result.ok:
        raise SubmissionError(result.failed, result.submitted, result.error)

    ui.report("")
    ui.report(
        "All work log items have been created successfully (you should probably double check though)",
        "success",
    )
    logger.info(f"Created {len(result.submitted)} work log(s) for {options.date}")
    return Outcome.DONE
