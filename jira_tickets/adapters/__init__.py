"""Adapter package for the Jira ticket viewer."""

from .jira_api import JiraAPI, JiraRequestError, JiraResponseError, SEARCH_FIELDS

__all__ = ["JiraAPI", "JiraRequestError", "JiraResponseError", "SEARCH_FIELDS"]
