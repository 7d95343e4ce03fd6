from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from .exceptions import RecordError

WORDS_PER_MINUTE = 200

REQUIRED_FIELDS = ("id", "title", "summary", "content", "author", "publishedAt", "category")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 date-time; naive values are taken as UTC."""
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


# --- Data models ---
@dataclass(frozen=True, eq=False)
class Article:
    id: str
    title: str
    summary: str
    content: str
    author: str
    published_at: datetime
    category: str
    image_url: Optional[str] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Article):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def reading_minutes(self) -> int:
        return max(1, round(len(self.content.split()) / WORDS_PER_MINUTE))

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Article:
        """Build an Article from one raw data-source record.

        Raises RecordError naming the offending field when a required key is
        missing, is not a string, or the timestamp cannot be parsed.
        """
        if not isinstance(record, Mapping):
            raise RecordError(f"expected an object, got {type(record).__name__}")

        values: Dict[str, str] = {}
        for key in REQUIRED_FIELDS:
            if key not in record:
                raise RecordError(f"missing required field '{key}'", field=key)
            value = record[key]
            if not isinstance(value, str):
                raise RecordError(f"field '{key}' must be a string", field=key)
            values[key] = value

        try:
            published_at = parse_timestamp(values["publishedAt"])
        except ValueError as e:
            raise RecordError(
                f"invalid timestamp {values['publishedAt']!r}: {e}", field="publishedAt"
            ) from e

        image_url = record.get("imageUrl")
        if image_url is not None and not isinstance(image_url, str):
            image_url = str(image_url)

        return cls(
            id=values["id"],
            title=values["title"],
            summary=values["summary"],
            content=values["content"],
            author=values["author"],
            published_at=published_at,
            image_url=image_url,
            category=values["category"],
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "summary": self.summary,
            "content": self.content,
            "author": self.author,
            "publishedAt": self.published_at.isoformat(),
            "imageUrl": self.image_url,
            "category": self.category,
        }
