"""Document and author models."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_validator


def ensure_utc(value: datetime | None) -> datetime | None:
    """Interpret naive timestamps as UTC so comparisons never mix kinds."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class Author(BaseModel):
    """Author attributed to a document; compared by value."""

    id: str | None = None
    name: str | None = None

    model_config = ConfigDict(frozen=True)


class Document(BaseModel):
    """Immutable representation of a stored document.

    Every field is optional on input. ``save`` fills in ``id`` and ``created``
    and returns an updated copy; the caller's instance is never modified.
    """

    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("created")
    @classmethod
    def _normalise_created(cls, value: datetime | None) -> datetime | None:
        return ensure_utc(value)

    def is_new(self) -> bool:
        """True when the document carries no usable identifier yet."""
        return self.id is None or not self.id.strip()


__all__ = ["Author", "Document", "ensure_utc"]
