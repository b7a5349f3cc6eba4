"""Document store orchestration helpers."""

from .document_store import DocumentStore, DocumentStoreError
from .factory import create_document_store

__all__ = ["DocumentStore", "DocumentStoreError", "create_document_store"]
