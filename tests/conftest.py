"""Shared fixtures for the Jira ticket viewer tests."""
import os
import time
from unittest.mock import patch

import pytest

from jira_tickets.configs import Config, DEFAULT_JQL

JIRA_ENV_VARS = [
    "JIRA_URL",
    "JIRA_PAT",
    "JIRA_API_TOKEN",
    "JIRA_AUTH_TYPE",
    "JIRA_EMAIL",
    "JIRA_JQL",
    "JIRA_MAX_RESULTS",
    "DEBUG",
    "RICH_LOGGING",
    "LOG_JIRA_PAYLOADS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's shell and any .env file out of the tests"""
    for name in JIRA_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    with patch("jira_tickets.configs.config.load_dotenv") as mock_load_dotenv:
        yield mock_load_dotenv


@pytest.fixture
def berlin_tz():
    """Render local dates in Europe/Berlin"""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    previous = os.environ.get("TZ")
    os.environ["TZ"] = "Europe/Berlin"
    time.tzset()
    yield
    if previous is None:
        del os.environ["TZ"]
    else:
        os.environ["TZ"] = previous
    time.tzset()


@pytest.fixture
def config():
    """Bearer token configuration for https://jira.example.com"""
    return Config(
        jira_url="https://jira.example.com",
        auth_token="tok123",
        auth_type="bearer",
        email="",
        jql=DEFAULT_JQL,
        rich_logging=False,
    )


def make_issue(key="ABC-1", summary="Fix bug", status="Open", priority="High", assignee=None,
               created="2024-01-01T12:00:00.000Z", updated="2024-01-02T12:00:00.000Z"):
    return {
        "key": key,
        "fields": {
            "summary": summary,
            "status": {"name": status},
            "assignee": assignee,
            "priority": {"name": priority},
            "created": created,
            "updated": updated,
        },
    }


def make_search_response(issues, total=None, max_results=100, start_at=0):
    return {
        "issues": issues,
        "total": len(issues) if total is None else total,
        "maxResults": max_results,
        "startAt": start_at,
    }


@pytest.fixture
def example_issue():
    """The unassigned ABC-1 issue used throughout the tests"""
    return make_issue(
        created="2024-01-01T00:00:00.000Z",
        updated="2024-01-02T00:00:00.000Z",
    )


@pytest.fixture
def assigned_issue():
    return make_issue(
        key="ABC-2",
        summary="Write docs",
        status="In Progress",
        priority="Medium",
        assignee={"displayName": "Erika Mustermann", "emailAddress": "erika@example.com"},
        created="2024-03-15T12:00:00.000+0000",
        updated="2024-03-16T12:00:00.000+0000",
    )
