from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from document_manager.models.document import Author, Document, ensure_utc


def test_authors_compare_by_value():
    assert Author(id="author-1", name="John Doe") == Author(id="author-1", name="John Doe")
    assert Author(id="author-1", name="John Doe") != Author(id="author-1", name="Jane")


def test_document_is_frozen():
    document = Document(title="Frozen")

    with pytest.raises(ValidationError):
        document.title = "Thawed"


def test_naive_created_is_interpreted_as_utc():
    document = Document(created=datetime(2024, 1, 1, 8, 0))

    assert document.created == datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc)


def test_aware_created_is_kept():
    offset = timezone(timedelta(hours=2))
    created = datetime(2024, 1, 1, 10, 0, tzinfo=offset)

    assert Document(created=created).created == created
    assert ensure_utc(None) is None


@pytest.mark.parametrize(("document_id", "expected"), [(None, True), ("", True), (" ", True), ("x", False)])
def test_is_new(document_id, expected):
    assert Document(id=document_id).is_new() is expected
