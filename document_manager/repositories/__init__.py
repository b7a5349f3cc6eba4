"""Storage and filtering primitives for documents."""

from .document_repository import InMemoryDocumentRepository
from .filters import SearchRequest, matches_request

__all__ = ["InMemoryDocumentRepository", "SearchRequest", "matches_request"]
