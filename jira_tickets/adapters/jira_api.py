"""Jira REST v2 search client."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from jira_tickets.configs import Config, DEFAULT_MAX_RESULTS
from jira_tickets.models import SearchResult, Ticket
from jira_tickets.utils import HttpRequestError, InvalidJsonError, SimpleHttpClient, browse_url

logger = logging.getLogger(__name__)

SEARCH_FIELDS = "summary,status,assignee,priority,created,updated"


class JiraRequestError(Exception):
    """A search request failed at the transport or HTTP level."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class JiraResponseError(JiraRequestError):
    """The server answered 2xx but the body is not a usable search result."""


class JiraAPI:
    """Simple wrapper around the Jira search endpoint."""

    def __init__(self, config: Config, http: Optional[SimpleHttpClient] = None):
        self.config = config
        self.http = http or SimpleHttpClient(config.api_base_url, headers=config.auth_headers())
        logger.debug("JiraAPI ready for %s (%s auth)", config.api_base_url, config.auth_type)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "JiraAPI":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def search(self, jql: str, max_results: int = DEFAULT_MAX_RESULTS) -> SearchResult:
        """Run one page of a JQL search.

        Failures are logged with the server's response body (or the error
        message when there is no response) and raised as
        :class:`JiraRequestError`.
        """
        params: Dict[str, Any] = {
            "jql": jql,
            "maxResults": max_results,
            "fields": SEARCH_FIELDS,
        }
        logger.debug("Searching issues with JQL: %s", jql)
        try:
            payload = self.http.get_json("/search", params=params)
        except InvalidJsonError as exc:
            logger.error("Fehler beim Abrufen der Tickets: %s", exc)
            raise JiraResponseError(str(exc), status_code=exc.status_code, body=exc.body) from exc
        except HttpRequestError as exc:
            logger.error("Fehler beim Abrufen der Tickets: %s", exc.body if exc.body else exc)
            raise JiraRequestError(str(exc), status_code=exc.status_code, body=exc.body) from exc

        if self.config.log_jira_payloads:
            logger.debug("Search payload: %s", payload)

        try:
            result = SearchResult.from_response(payload)
        except (ValidationError, AttributeError, TypeError) as exc:
            logger.error("Fehler beim Abrufen der Tickets: %s", exc)
            raise JiraResponseError(f"Unexpected search response: {exc}", body=payload) from exc

        if result.truncated:
            logger.debug(
                "Search returned %d of %d matching issues; remaining pages are not fetched",
                len(result.tickets),
                result.total,
            )
        logger.info("Fetched %d tickets", len(result.tickets))
        return result

    def get_my_tickets(self) -> List[Ticket]:
        """Return the tickets matched by the configured default JQL."""
        return self.search(self.config.jql, self.config.max_results).tickets

    def get_tickets_by_jql(self, jql: str, max_results: int = DEFAULT_MAX_RESULTS) -> List[Ticket]:
        """Return the tickets matched by a caller supplied JQL query."""
        return self.search(jql, max_results).tickets

    def browse_url(self, key: str) -> str:
        return browse_url(self.config.jira_url, key)
