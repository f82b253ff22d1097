"""
Configuration

Endpoints and request settings. Values come from the defaults below and may be
overridden through environment variables (a .env file is loaded by the CLI).
"""

import os
from dataclasses import dataclass

from .errors import UsageError


TOGGL_URL = "https://toggl.com"
JIRA_URL = "https://rockpool.atlassian.net"
USER_AGENT = "joggl-cli"

# Network request timeout (seconds)
DEFAULT_TIMEOUT = 30.0

TOGGL_TOKEN_HELP = "https://www.toggl.com/app/profile"
TOGGL_WORKSPACE_HELP = "https://www.toggl.com/app/reports/summary/"


@dataclass
class Config:
    """Application configuration"""
    toggl_url: str = TOGGL_URL
    jira_url: str = JIRA_URL
    request_timeout: float = DEFAULT_TIMEOUT
    user_agent: str = USER_AGENT

    @classmethod
    def from_env(cls) -> "Config":
        """Build a configuration from the environment."""
        config = cls()
        config.toggl_url = os.environ.get("JOGGL_TOGGL_URL", config.toggl_url)
        config.jira_url = os.environ.get("JIRA_URL", config.jira_url)
        timeout = os.environ.get("JOGGL_TIMEOUT")
        if timeout:
            try:
                config.request_timeout = float(timeout)
            except ValueError:
                raise UsageError(f"JOGGL_TIMEOUT must be a number of seconds, got {timeout!r}")
        return config
