"""Value models held by the document store."""

from .document import Author, Document, ensure_utc

__all__ = ["Author", "Document", "ensure_utc"]
