from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest

from document_manager.models.document import Author, Document
from document_manager.repositories.document_repository import InMemoryDocumentRepository
from document_manager.store import DocumentStore, create_document_store

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class SteppingClock:
    """Clock returning strictly increasing instants, one second apart."""

    def __init__(self, start: datetime = BASE_TIME, step: timedelta = timedelta(seconds=1)):
        self._current = start
        self._step = step

    def __call__(self) -> datetime:
        value = self._current
        self._current += self._step
        return value


@pytest.fixture
def base_time() -> datetime:
    return BASE_TIME


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture
def repository() -> InMemoryDocumentRepository:
    return InMemoryDocumentRepository()


@pytest.fixture
def document_store(clock: SteppingClock) -> DocumentStore:
    return create_document_store(clock=clock)


@pytest.fixture
def document_factory() -> Callable[..., Document]:
    def _factory(
        *,
        document_id=None,
        title=None,
        content=None,
        author_id=None,
        author_name=None,
        created=None,
    ) -> Document:
        author = None
        if author_id is not None or author_name is not None:
            author = Author(id=author_id, name=author_name)
        return Document(
            id=document_id,
            title=title,
            content=content,
            author=author,
            created=created,
        )

    return _factory
