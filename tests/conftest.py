"""Pytest configuration and fixtures."""

import pytest
from unittest.mock import MagicMock, patch

from joggl.models import RawTimeEntry


class ScriptedUI:
    """UI double: answers from a script and records everything reported."""

    def __init__(self, answers=None, confirm=True):
        self.answers = list(answers or [])
        self.confirm_answer = confirm
        self.prompts = []
        self.messages = []
        self.shown = []
        self.confirmations = 0

    def ask(self, prompt):
        self.prompts.append(prompt)
        return self.answers.pop(0)

    def ask_password(self, prompt):
        return self.ask(prompt)

    def confirm(self, prompt):
        self.confirmations += 1
        return self.confirm_answer

    def report(self, message, severity="info"):
        self.messages.append((severity, message))

    def show_items(self, items):
        self.shown = list(items)

    def text(self):
        return "\n".join(message for _, message in self.messages)

    def errors(self):
        return [message for severity, message in self.messages if severity == "error"]


def make_response(status_code=200, json_data=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.reason = "Created" if status_code == 201 else "Error"
    response.text = str(json_data)
    response.json.return_value = json_data
    return response


def report_row(description, dur, pid=1, project="X"):
    return {"pid": pid, "project": project, "description": description, "dur": dur}


@pytest.fixture
def ui():
    return ScriptedUI()


@pytest.fixture
def sample_entries():
    """Two merged entries plus one on another project."""
    return [
        RawTimeEntry(1, "X", "Fix ABC-12 bug", 60000),
        RawTimeEntry(1, "X", "Fix ABC-12 bug", 30000),
        RawTimeEntry(2, "Y", "Review XYZ-7", 1500),
    ]


@pytest.fixture
def report_body():
    """Toggl details report with three rows for two work items."""
    return {
        "total_count": 3,
        "per_page": 50,
        "data": [
            report_row("Fix ABC-12 bug", 60000),
            report_row("Fix ABC-12 bug", 30000),
            report_row("Review XYZ-7", 1500, pid=2, project="Y"),
        ],
    }


@pytest.fixture
def search_body():
    """Jira search response where both tickets are subtasks."""
    return {
        "issues": [
            {"key": "ABC-12", "fields": {"issuetype": {"subtask": True}}},
            {"key": "XYZ-7", "fields": {"issuetype": {"subtask": True}}},
        ]
    }


@pytest.fixture
def mock_requests_session():
    """Mock requests session for API testing."""
    with patch("requests.Session") as mock_session:
        mock_instance = MagicMock()
        mock_session.return_value = mock_instance
        yield mock_instance


@pytest.fixture
def make_ui():
    """Factory for scripted UIs."""
    return ScriptedUI


@pytest.fixture(name="make_response")
def make_response_fixture():
    """Factory for mock HTTP responses."""
    return make_response


@pytest.fixture(name="report_row")
def report_row_fixture():
    """Factory for Toggl report rows."""
    return report_row
