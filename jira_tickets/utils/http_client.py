"""Session handling for JSON GET requests against one REST base URL."""

from __future__ import annotations

from typing import Any, Dict, Optional
import logging
import requests

logger = logging.getLogger(__name__)


class HttpRequestError(Exception):
    """Transport failure or non-2xx answer, with whatever the server sent back."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class InvalidJsonError(HttpRequestError):
    """A 2xx answer whose body does not decode as JSON."""


def response_body(response: Optional[requests.Response]) -> Any:
    """Return the decoded JSON of ``response``, its raw text, or ``None``."""
    if response is None:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class SimpleHttpClient:
    """A :class:`requests.Session` bound to a base URL and default headers.

    No timeout or retry is configured; a call blocks until the server answers
    or the connection fails.
    """

    def __init__(self, base_url: str, headers: Optional[Dict[str, str]] = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.session.headers.update(headers or {})
        logger.debug("HTTP session opened for %s", self.base_url)

    def close(self) -> None:
        self.session.close()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET ``path`` and return the decoded body.

        Raises :class:`HttpRequestError` carrying the status code and error
        body when the request fails, and :class:`InvalidJsonError` when a
        successful answer is not JSON.
        """
        url = self.url_for(path)
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self.session.get(url, params=params)
            logger.info("GET %s -> %s", url, response.status_code)
            response.raise_for_status()
        except requests.RequestException as exc:
            # ConnectionError and friends carry no response
            failed = getattr(exc, "response", None)
            raise HttpRequestError(
                str(exc),
                status_code=failed.status_code if failed is not None else None,
                body=response_body(failed),
            ) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise InvalidJsonError(
                f"Response from {url} is not JSON: {exc}",
                status_code=response.status_code,
                body=response.text,
            ) from exc


__all__ = ["HttpRequestError", "InvalidJsonError", "SimpleHttpClient", "response_body"]
