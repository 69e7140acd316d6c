"""Domain models for authenticated sessions."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SessionRecord:
    """Server-side view of a client bearer token."""

    token: str
    user_id: str | None
    started_at: datetime
    last_activity_at: datetime
