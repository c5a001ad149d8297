"""Console report for a list of tickets."""
from typing import List, Sequence

import typer

from jira_tickets.models import Ticket
from jira_tickets.utils import browse_url, format_german_date

BANNER = "=" * 80
UNASSIGNED = "Nicht zugewiesen"
NO_TICKETS = "Keine Tickets gefunden."


def format_tickets(tickets: Sequence[Ticket], base_url: str) -> str:
    """Return the report text for ``tickets``.

    An empty sequence yields only the header and the "no tickets" line.
    """
    lines: List[str] = ["", BANNER, f"Gefundene Tickets: {len(tickets)}", BANNER]
    if not tickets:
        lines.append(NO_TICKETS)
        return "\n".join(lines)

    for index, ticket in enumerate(tickets, start=1):
        assignee = ticket.assignee.display_name if ticket.assignee else UNASSIGNED
        lines.extend(
            [
                "",
                f"{index}. {ticket.key} - {ticket.summary}",
                f"   Status: {ticket.status}",
                f"   Priorität: {ticket.priority}",
                f"   Zugewiesen an: {assignee}",
                f"   Erstellt: {format_german_date(ticket.created)}",
                f"   Aktualisiert: {format_german_date(ticket.updated)}",
                f"   Link: {browse_url(base_url, ticket.key)}",
            ]
        )
    lines.extend(["", BANNER, ""])
    return "\n".join(lines)


def display_tickets(tickets: Sequence[Ticket], base_url: str) -> None:
    typer.echo(format_tickets(tickets, base_url))
