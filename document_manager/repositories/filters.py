"""Search request primitives and the predicates evaluated against documents."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from document_manager.models.document import Document, ensure_utc


def _normalise_values(name: str, values: Iterable[str] | None) -> tuple[str, ...] | None:
    if values is None:
        return None
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise TypeError(f"SearchRequest.{name} expects a non-string iterable of strings.")
    return tuple(values)


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """Independent optional filters; all supplied filters must match.

    Values inside a single filter are OR-matched. An absent or empty filter
    matches every document, except for the creation-time check which always
    requires the document to carry a ``created`` timestamp.
    """

    title_prefixes: tuple[str, ...] | None = None
    contains_contents: tuple[str, ...] | None = None
    author_ids: tuple[str, ...] | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    def __post_init__(self) -> None:
        for name in ("title_prefixes", "contains_contents", "author_ids"):
            object.__setattr__(self, name, _normalise_values(name, getattr(self, name)))
        object.__setattr__(self, "created_from", ensure_utc(self.created_from))
        object.__setattr__(self, "created_to", ensure_utc(self.created_to))


def matches_title(document: Document, title_prefixes: Iterable[str] | None) -> bool:
    """Title starts with any of the prefixes (case-sensitive)."""
    if not title_prefixes:
        return True
    if document.title is None:
        return False
    return any(document.title.startswith(prefix) for prefix in title_prefixes)


def matches_content(document: Document, contains_contents: Iterable[str] | None) -> bool:
    """Content contains any of the substrings (case-sensitive)."""
    if not contains_contents:
        return True
    if document.content is None:
        return False
    return any(fragment in document.content for fragment in contains_contents)


def matches_author(document: Document, author_ids: Iterable[str] | None) -> bool:
    if not author_ids:
        return True
    if document.author is None or document.author.id is None:
        return False
    return document.author.id in author_ids


def matches_creation_time(
    document: Document,
    created_from: datetime | None,
    created_to: datetime | None,
) -> bool:
    """Inclusive range check; a document without ``created`` never matches."""
    if document.created is None:
        return False
    if created_from is not None and document.created < created_from:
        return False
    if created_to is not None and document.created > created_to:
        return False
    return True


def matches_request(document: Document, request: SearchRequest) -> bool:
    """Apply every filter of ``request`` to ``document``."""
    return (
        matches_title(document, request.title_prefixes)
        and matches_content(document, request.contains_contents)
        and matches_author(document, request.author_ids)
        and matches_creation_time(document, request.created_from, request.created_to)
    )


__all__ = [
    "SearchRequest",
    "matches_author",
    "matches_content",
    "matches_creation_time",
    "matches_request",
    "matches_title",
]
