"""Command line interface for the Jira ticket viewer."""

from .main import app

__all__ = ["app"]
