"""
Models module for the Jira ticket viewer.

This module contains the pydantic shapes the search response is mapped into.
"""

from .jira_models import Assignee, SearchResult, Ticket

__all__ = ["Assignee", "SearchResult", "Ticket"]
