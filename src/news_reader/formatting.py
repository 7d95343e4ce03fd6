from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def time_ago(published_at: datetime, now: Optional[datetime] = None) -> str:
    """Short relative age for list items, e.g. '3d ago'."""
    now = now or datetime.now(timezone.utc)
    seconds = int((now - published_at).total_seconds())
    if seconds >= 86400:
        return f"{seconds // 86400}d ago"
    if seconds >= 3600:
        return f"{seconds // 3600}h ago"
    if seconds >= 60:
        return f"{seconds // 60}m ago"
    return "just now"


def long_date(published_at: datetime) -> str:
    return f"{published_at.day} {MONTHS[published_at.month - 1]} {published_at.year}"
