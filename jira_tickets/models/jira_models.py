from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, field_validator

from jira_tickets.utils.jira import parse_jira_datetime


class Assignee(BaseModel):
    display_name: str
    # Jira Cloud omits emailAddress for users who hide it
    email_address: str = ""


class Ticket(BaseModel):
    key: str
    summary: str
    status: str
    assignee: Optional[Assignee] = None
    priority: str
    created: datetime
    updated: datetime

    @field_validator("created", "updated", mode="before")
    @classmethod
    def parse_timestamps(cls, value: Any) -> Any:
        return parse_jira_datetime(value)

    @classmethod
    def from_issue(cls, issue: Dict[str, Any]) -> "Ticket":
        """Build a ticket from one entry of the ``issues`` array."""
        fields = issue.get("fields") or {}
        assignee = fields.get("assignee")
        return cls(
            key=issue.get("key"),
            summary=fields.get("summary"),
            status=(fields.get("status") or {}).get("name"),
            assignee=Assignee(
                display_name=assignee["displayName"],
                email_address=assignee.get("emailAddress") or "",
            )
            if assignee and assignee.get("displayName")
            else None,
            priority=(fields.get("priority") or {}).get("name"),
            created=fields.get("created"),
            updated=fields.get("updated"),
        )


class SearchResult(BaseModel):
    tickets: List[Ticket] = []
    total: int = 0
    max_results: int = 0
    start_at: int = 0

    @property
    def truncated(self) -> bool:
        return self.start_at + len(self.tickets) < self.total

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "SearchResult":
        """Map the body of ``GET /search``."""
        issues = payload.get("issues") or []
        return cls(
            tickets=[Ticket.from_issue(issue) for issue in issues],
            total=payload.get("total", len(issues)),
            max_results=payload.get("maxResults", len(issues)),
            start_at=payload.get("startAt", 0),
        )
