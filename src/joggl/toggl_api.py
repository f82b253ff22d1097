"""
Toggl Reports API client

Only the detailed report of a single day, first page, is supported.
"""

import logging
from dataclasses import dataclass

import requests

from .config import DEFAULT_TIMEOUT, USER_AGENT
from .errors import PageLimitExceeded, TransportError
from .models import RawTimeEntry

logger = logging.getLogger(__name__)

SERVICE = "Toggl"


@dataclass
class TimeReport:
    """Parsed first page of the detailed report"""
    total_count: int
    per_page: int
    entries: list[RawTimeEntry]

    @property
    def is_complete(self) -> bool:
        return self.total_count <= self.per_page


class TogglClient:
    """Toggl Reports API v2 client"""

    def __init__(self, base_url: str, api_token: str, timeout: float = DEFAULT_TIMEOUT,
                 user_agent: str = USER_AGENT):
        """
        Args:
            base_url: Toggl URL (e.g., https://toggl.com)
            api_token: personal API token
            timeout: request timeout in seconds
            user_agent: value of the user_agent query parameter
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.user_agent = user_agent
        self.session = requests.Session()
        # Toggl token auth: token as username, literal "api_token" as password
        self.session.auth = (api_token, "api_token")
        self.session.headers.update({"Accept": "application/json"})

    def report_url(self) -> str:
        return f"{self.base_url}/reports/api/v2/details"

    def report_params(self, workspace_id: str, date: str) -> dict:
        return {
            "user_agent": self.user_agent,
            "workspace_id": workspace_id,
            "page": 1,
            "since": date,
            "until": date,
        }

    def get_details(self, workspace_id: str, date: str) -> dict:
        """Fetch the raw JSON body of the first report page."""
        url = self.report_url()
        params = self.report_params(workspace_id, date)
        logger.debug(f"GET {url} params={params}")
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise TransportError(SERVICE, f"Cannot fetch report: {e}")

        if not resp.ok:
            raise TransportError(SERVICE, f"HTTP {resp.status_code} - {resp.text}", resp.status_code)

        try:
            return resp.json()
        except ValueError as e:
            raise TransportError(SERVICE, f"Invalid JSON in report response: {e}", resp.status_code)

    def fetch_report(self, workspace_id: str, date: str) -> TimeReport:
        """
        Fetch all time entries of one day.

        Raises:
            PageLimitExceeded: the day has more entries than fit on one page
            TransportError: network failure or malformed response
        """
        body = self.get_details(workspace_id, date)
        try:
            report = parse_report(body)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise TransportError(SERVICE, f"Unexpected report format: {e}")

        if not report.is_complete:
            raise PageLimitExceeded(report.total_count, report.per_page)

        logger.info(f"Fetched {len(report.entries)} entries for {date}")
        return report


def parse_report(body: dict) -> TimeReport:
    """Parse the details report body into a TimeReport."""
    data = body.get("data") or []
    total_count = int(body.get("total_count", len(data)))
    per_page = int(body.get("per_page", total_count))
    return TimeReport(
        total_count=total_count,
        per_page=per_page,
        entries=[RawTimeEntry.from_report_row(row) for row in data],
    )
