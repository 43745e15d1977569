"""Command-line demo that builds a small index and removes duplicates."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, Sequence, TextIO

from docsearch.remove_duplicates import remove_duplicates
from docsearch.search_server import Document, DocumentStatus, SearchServer

_SAMPLE_TEXTS = (
    "cat funny and nasty rat",
    "funny with curly hair",
    "funny pet and not very nasty rat",
    "pet with rat and rat and rat",
    "nasty rat with curly hair",
)


def _target(out: Optional[TextIO]) -> TextIO:
    return out if out is not None else sys.stdout


def format_document(document: Document) -> str:
    """Render a search hit as one line."""
    return (
        f"{{ document_id = {document.id}, "
        f"relevance = {document.relevance:g}, "
        f"rating = {document.rating} }}"
    )


def format_match_result(
    document_id: int, words: Iterable[str], status: DocumentStatus
) -> str:
    """Render the result of matching a query against one document."""
    rendered = "".join(f" {word}" for word in words)
    return (
        f"{{ document_id = {document_id}, status = {status.value}, "
        f"words ={rendered}}}"
    )


def add_document(
    search_server: SearchServer,
    document_id: int,
    document: str,
    status: DocumentStatus,
    ratings: Iterable[int],
    out: Optional[TextIO] = None,
) -> bool:
    """Add a document, reporting a failure instead of raising it."""
    try:
        search_server.add_document(document_id, document, status, ratings)
    except ValueError as error:
        print(f"Error adding document {document_id}: {error}", file=_target(out))
        return False
    return True


def find_top_documents(
    search_server: SearchServer, raw_query: str, out: Optional[TextIO] = None
) -> None:
    """Print the top documents for a query, or the error it caused."""
    target = _target(out)
    print(f"Search results for query: {raw_query}", file=target)
    try:
        documents = search_server.find_top_documents(raw_query)
    except ValueError as error:
        print(f"Search error: {error}", file=target)
        return
    for document in documents:
        print(format_document(document), file=target)


def match_documents(
    search_server: SearchServer, query: str, out: Optional[TextIO] = None
) -> None:
    """Print the match of a query against every indexed document."""
    target = _target(out)
    print(f"Matching documents for query: {query}", file=target)
    try:
        for document_id in search_server:
            words, status = search_server.match_document(query, document_id)
            print(format_match_result(document_id, words, status), file=target)
    except ValueError as error:
        print(f"Error matching documents for query {query}: {error}", file=target)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Index a few sample documents and remove the duplicated one."""
    parser = argparse.ArgumentParser(
        prog="docsearch",
        description="Index sample documents and remove duplicates.",
    )
    parser.parse_args(argv)

    search_server = SearchServer("and with")
    for document_id, text in enumerate(_SAMPLE_TEXTS, start=1):
        add_document(search_server, document_id, text, DocumentStatus.ACTUAL, [1, 2])
    add_document(
        search_server, 6, _SAMPLE_TEXTS[0], DocumentStatus.ACTUAL, [1, 2]
    )
    remove_duplicates(search_server)
    return 0


if __name__ == "__main__":
    sys.exit(main())