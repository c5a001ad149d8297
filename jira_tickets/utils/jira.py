"""Jira-related helper utilities."""
from datetime import datetime, timezone
from typing import Any
import logging

logger = logging.getLogger(__name__)

JIRA_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"


def parse_jira_datetime(value: Any) -> Any:
    """Return a timezone-aware ``datetime`` for a Jira timestamp string.

    Jira Server answers with ``+0000`` style offsets while Cloud payloads and
    fixtures often use a trailing ``Z``; both are accepted, with or without
    fractional seconds. Non-string values are returned untouched.
    """
    if not isinstance(value, str):
        return value
    text = value.strip()
    for fmt in (JIRA_DATETIME_FORMAT, "%Y-%m-%dT%H:%M:%S%z"):
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    logger.debug("Falling back to ISO parsing for %s", text)
    parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_german_date(value: datetime) -> str:
    """Return ``value`` as a German short date (``1.1.2024``) in local time."""
    local = value.astimezone()
    return f"{local.day}.{local.month}.{local.year}"


def browse_url(base_url: str, key: str) -> str:
    """Return the web link for the ticket ``key``."""
    return f"{base_url.rstrip('/')}/browse/{key}"
