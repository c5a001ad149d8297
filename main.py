"""CLI entry point for the Jira ticket viewer.

Running ``python main.py`` fetches the tickets assigned to the current user
(or the ones matched by ``JIRA_JQL``) and prints them as a console report.
See ``python main.py --help`` for the custom query and configuration
commands.
"""

from jira_tickets.cli import app


if __name__ == "__main__":
    app()
