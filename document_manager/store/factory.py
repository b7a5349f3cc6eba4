"""Factory helpers for constructing the document store façade."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from document_manager.repositories.document_repository import InMemoryDocumentRepository

from .document_store import DocumentStore


def create_document_store(
    *,
    id_factory: Callable[[], str] | None = None,
    clock: Callable[[], datetime] | None = None,
) -> DocumentStore:
    """Build a DocumentStore backed by a fresh in-memory repository."""
    return DocumentStore(InMemoryDocumentRepository(), id_factory=id_factory, clock=clock)


__all__ = ["create_document_store"]
