"""Upsert, search and lookup façade over the document repository."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable
from uuid import uuid4

from document_manager.models.document import Document, ensure_utc
from document_manager.repositories.document_repository import InMemoryDocumentRepository
from document_manager.repositories.filters import SearchRequest, matches_request

logger = logging.getLogger(__name__)


class DocumentStoreError(RuntimeError):
    """Raised when DocumentStore operations receive invalid input."""


def _generate_id() -> str:
    return str(uuid4())


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DocumentStore:
    """Thin façade that assigns identity and creation time, then delegates storage."""

    def __init__(
        self,
        repository: InMemoryDocumentRepository,
        *,
        id_factory: Callable[[], str] | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """Internal constructor; prefer ``create_document_store`` for public use."""
        self._repository = repository
        self._id_factory = id_factory or _generate_id
        self._clock = clock or _utc_now

    # ----------------------------------------------------------- Mutating ops
    def save(self, document: Document) -> Document:
        """Upsert ``document`` and return the stored copy.

        Documents without an id (or with a blank one) get a generated id.
        On update the stored ``created`` is kept unless the caller supplies
        one explicitly, in which case the supplied value wins.
        """
        if document is None:
            raise DocumentStoreError("Cannot save a missing document.")

        if document.is_new():
            return self._save_new(document)
        return self._save_existing(document)

    # ------------------------------------------------------------------ Queries
    def search(self, request: SearchRequest | None) -> list[Document]:
        """Return documents matching every filter in ``request``."""
        if request is None:
            return []
        results = [
            document
            for document in self._repository.list_documents()
            if matches_request(document, request)
        ]
        logger.debug("Search matched %d of %d documents", len(results), len(self._repository))
        return results

    def find_by_id(self, document_id: str | None) -> Document | None:
        """Fetch a document by its exact identifier."""
        if document_id is None:
            return None
        return self._repository.get(document_id)

    # ----------------------------------------------------------------- Helpers
    def _save_new(self, document: Document) -> Document:
        update: dict[str, object] = {"id": self._id_factory()}
        if document.created is None:
            update["created"] = self._now()
        return self._repository.put(document.model_copy(update=update))

    def _save_existing(self, document: Document) -> Document:
        if document.created is not None:
            return self._repository.put(document)

        existing = self._repository.get(document.id)
        if existing is not None:
            created = existing.created
        else:
            created = self._now()
        return self._repository.put(document.model_copy(update={"created": created}))

    def _now(self) -> datetime:
        return ensure_utc(self._clock())


__all__ = [
    "DocumentStore",
    "DocumentStoreError",
]
