"""
Jira REST API client

Issue search by JQL and work-log creation, using basic auth.
"""

import logging
from typing import Optional

import requests

from .config import DEFAULT_TIMEOUT
from .errors import TransportError
from .models import IssueRecord, WorklogPayload

logger = logging.getLogger(__name__)

SERVICE = "Jira"


def _describe_status(resp: requests.Response) -> str:
    """Convert HTTP errors to user-friendly messages."""
    messages = {
        400: "Bad request",
        401: "Authentication failed. Check your username and password!",
        403: "Access denied. Check your permissions!",
        404: "Resource not found",
        429: "Too many requests. Wait a moment and try again.",
    }
    return messages.get(resp.status_code, f"HTTP {resp.status_code} - {resp.reason}")


class JiraClient:
    """Jira REST API v2 client"""

    def __init__(self, base_url: str, username: str, password: str,
                 timeout: float = DEFAULT_TIMEOUT):
        """
        Args:
            base_url: Jira URL (e.g., https://rockpool.atlassian.net)
            username: Jira username
            password: Jira password or API token
            timeout: request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()
        self.session.auth = (username, password)
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json"
        })

    def search_issues(self, jql: str, max_results: Optional[int] = None) -> dict[str, IssueRecord]:
        """
        Run a JQL search.

        Args:
            jql: search query
            max_results: page size; Jira returns 50 issues when omitted

        Returns:
            issue key -> IssueRecord
        """
        url = f"{self.base_url}/rest/api/2/search"
        params = {"jql": jql}
        if max_results:
            params["maxResults"] = max_results
        logger.debug(f"GET {url} params={params}")
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise TransportError(SERVICE, f"Cannot search issues: {e}")

        if not resp.ok:
            raise TransportError(SERVICE, _describe_status(resp), resp.status_code)

        try:
            issues = resp.json()["issues"]
            records = [IssueRecord.from_search_result(issue) for issue in issues]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise TransportError(SERVICE, f"Unexpected search response: {e}", resp.status_code)

        return {record.key: record for record in records}

    def worklog_url(self, issue_key: str) -> str:
        return f"{self.base_url}/rest/api/2/issue/{issue_key}/worklog"

    def add_worklog(self, payload: WorklogPayload) -> dict:
        """
        Create a work-log on an issue.

        Only HTTP 201 counts as success; anything else raises TransportError.
        """
        url = self.worklog_url(payload.issue_key)
        logger.debug(f"POST {url} timeSpentSeconds={payload.time_spent_seconds}")
        try:
            resp = self.session.post(url, json=payload.to_json(), timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise TransportError(SERVICE, f"Cannot create work log: {e}")

        if resp.status_code != 201:
            raise TransportError(SERVICE, _describe_status(resp), resp.status_code)

        try:
            return resp.json()
        except ValueError:
            return {}
