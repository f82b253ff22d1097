"""Ticket id extraction from free-text descriptions."""

import re


# Jira ticket key: ABC-123 (project key starts with a letter, number has no leading zero)
TICKET_KEY = re.compile(r"[a-zA-Z][a-zA-Z0-9_]+-[1-9][0-9]*")


def extract_ids(text: str) -> list[str]:
    """Return every ticket id in `text`, left to right."""
    if not text:
        return []
    return TICKET_KEY.findall(text)
