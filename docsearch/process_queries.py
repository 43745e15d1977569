"""Running several queries against one search server."""

from __future__ import annotations

from itertools import chain
from typing import Iterable

from docsearch.search_server import Document, SearchServer


def process_queries(
    search_server: SearchServer, queries: Iterable[str]
) -> list[list[Document]]:
    """Return the top documents of each query, in the order of the queries."""
    return [search_server.find_top_documents(query) for query in queries]


def process_queries_joined(
    search_server: SearchServer, queries: Iterable[str]
) -> list[Document]:
    """Return the top documents of all queries as one flat list."""
    return list(chain.from_iterable(process_queries(search_server, queries)))