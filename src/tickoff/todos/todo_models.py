# src/tickoff/todos/todo_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

from ..core.errors import ValidationError

TITLE_MAX_LENGTH = 500


class TodoFilter(StrEnum):
    """Client-side view selector over the fetched list."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str | None) -> TodoFilter:
        if not raw:
            return cls.ALL
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown filter: {raw!r} (use all, active or completed)") from None


@dataclass(slots=True, frozen=True)
class Todo:
    id: str
    user_id: str
    title: str
    completed: bool
    created_at: float
    updated_at: float

    def to_json(self) -> dict[str, Any]:
        """Wire shape: {id, userId, title, completed, createdAt, updatedAt}."""
        return {
            "id": self.id,
            "userId": self.user_id,
            "title": self.title,
            "completed": self.completed,
            "createdAt": _ts_to_iso(self.created_at),
            "updatedAt": _ts_to_iso(self.updated_at),
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Todo:
        return cls(
            id=str(data["id"]),
            user_id=str(data["userId"]),
            title=str(data["title"]),
            completed=bool(data["completed"]),
            created_at=_iso_to_ts(str(data["createdAt"])),
            updated_at=_iso_to_ts(str(data["updatedAt"])),
        )


@dataclass(slots=True, frozen=True)
class TodoPatch:
    """
    Partial update. None means "field not present, leave it alone".
    """

    title: str | None = None
    completed: bool | None = None


def validate_title(raw: Any) -> str:
    """
    Validate a todo title: any string of 1..TITLE_MAX_LENGTH characters.

    The title is stored exactly as given; trimming is left to the client.
    """
    if not isinstance(raw, str) or not raw:
        raise ValidationError("Title is required")
    if len(raw) > TITLE_MAX_LENGTH:
        raise ValidationError(f"Title must be at most {TITLE_MAX_LENGTH} characters")
    return raw


def _ts_to_iso(ts: float) -> str:
    dt = datetime.fromtimestamp(ts, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _iso_to_ts(text: str) -> float:
    return datetime.fromisoformat(text.replace("Z", "+00:00")).timestamp()
