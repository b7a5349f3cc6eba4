"""Demo script exercising save, search and lookup on a fresh store."""

from __future__ import annotations

import argparse
import logging
import time
from datetime import timedelta
from typing import Iterable

from document_manager.models.document import Author, Document
from document_manager.repositories.filters import SearchRequest
from document_manager.store import create_document_store


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Save and query sample documents in memory.")
    parser.add_argument(
        "--pause-ms",
        type=int,
        default=10,
        help="Delay between saves so creation times strictly increase.",
    )
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if not args.quiet else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )
    logger = logging.getLogger("demo_documents")

    store = create_document_store()

    author_1 = Author(id="author-1", name="John Doe")
    author_2 = Author(id="author-2", name="Jane Smith")
    drafts = [
        Document(
            title="Java Basics",
            content="This document covers Java fundamentals.",
            author=author_1,
        ),
        Document(
            title="Advanced Java",
            content="This document is about Java Streams and concurrency.",
            author=author_1,
        ),
        Document(
            title="Python Intro",
            content="This document is for Python beginners.",
            author=author_2,
        ),
    ]

    saved: list[Document] = []
    for index, draft in enumerate(drafts):
        if index and args.pause_ms > 0:
            time.sleep(args.pause_ms / 1000)
        saved.append(store.save(draft))
    logger.info("Saved %d documents", len(saved))

    _print_results("Search by title prefix 'Java':", store.search(SearchRequest(title_prefixes=["Java"])))
    _print_results("Search by author 'author-2':", store.search(SearchRequest(author_ids=["author-2"])))

    target_id = saved[1].id
    found = store.find_by_id(target_id)
    _print_results(f"Lookup by id '{target_id}':", [found] if found else [])

    window = SearchRequest(
        created_from=saved[0].created - timedelta(seconds=1),
        created_to=saved[-1].created + timedelta(seconds=1),
    )
    _print_results("Search by creation time (all documents):", store.search(window))


def _print_results(heading: str, documents: Iterable[Document]) -> None:
    print(f"\n{heading}")
    for document in documents:
        author = document.author.name if document.author else "unknown"
        print(f"- {document.title} by {author} ({document.id}, created {document.created.isoformat()})")


if __name__ == "__main__":
    main()
