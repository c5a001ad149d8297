"""
User interface module for the Jira ticket viewer.

Renders search results as a plain text console report.
"""

from .display import BANNER, NO_TICKETS, UNASSIGNED, display_tickets, format_tickets

__all__ = ["BANNER", "NO_TICKETS", "UNASSIGNED", "display_tickets", "format_tickets"]
