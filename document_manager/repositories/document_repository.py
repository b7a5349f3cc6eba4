"""Dictionary-backed repository for Document models."""

from __future__ import annotations

import logging

from document_manager.models.document import Document

logger = logging.getLogger(__name__)


class InMemoryDocumentRepository:
    """Repository that owns the ``id -> Document`` mapping for one store.

    Contents live for the lifetime of the instance only. Iteration follows
    insertion order; replacing a document keeps its original position.
    """

    def __init__(self) -> None:
        self._documents: dict[str, Document] = {}

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def get(self, document_id: str) -> Document | None:
        """Fetch a document by its exact identifier."""
        return self._documents.get(document_id)

    def put(self, document: Document) -> Document:
        """Insert or replace ``document`` under its identifier."""
        if document.is_new():
            raise ValueError("Documents must carry a non-empty id before they are stored.")
        replaced = document.id in self._documents
        self._documents[document.id] = document
        logger.debug("%s document %s", "Replaced" if replaced else "Inserted", document.id)
        return document

    def list_documents(self) -> list[Document]:
        """Return a snapshot of all documents in insertion order."""
        return list(self._documents.values())


__all__ = ["InMemoryDocumentRepository"]
