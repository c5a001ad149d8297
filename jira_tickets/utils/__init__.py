"""Utility helpers for the Jira ticket viewer."""

from .jira import browse_url, format_german_date, parse_jira_datetime
from .http_client import HttpRequestError, InvalidJsonError, SimpleHttpClient, response_body

__all__ = [
    "browse_url",
    "format_german_date",
    "parse_jira_datetime",
    "HttpRequestError",
    "InvalidJsonError",
    "SimpleHttpClient",
    "response_body",
]
