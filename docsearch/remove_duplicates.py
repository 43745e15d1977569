"""Removal of documents whose word sets repeat an earlier document."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from docsearch.search_server import SearchServer


def remove_duplicates(
    search_server: SearchServer, out: Optional[TextIO] = None
) -> list[int]:
    """Remove every document whose set of words matches one with a lower id.

    Each removal is reported to ``out``; the removed ids are returned in
    ascending order.
    """
    seen: set[frozenset[str]] = set()
    duplicates: list[int] = []
    for document_id in search_server:
        words = frozenset(search_server.get_word_frequencies(document_id))
        if words in seen:
            duplicates.append(document_id)
        else:
            seen.add(words)

    target = out if out is not None else sys.stdout
    for document_id in duplicates:
        print(f"Found duplicate document id {document_id}", file=target)
        search_server.remove_document(document_id)
    return duplicates