"""In-memory full-text search server with TF-IDF ranking."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Callable, Iterable, Iterator, Union

MAX_RESULT_DOCUMENT_COUNT = 5
EPSILON = 1e-6


@dataclass
class Document:
    """A search hit: document id, its relevance to the query and its rating."""

    id: int = 0
    relevance: float = 0.0
    rating: int = 0


class DocumentStatus(Enum):
    ACTUAL = 0
    IRRELEVANT = 1
    BANNED = 2
    REMOVED = 3


Predicate = Callable[[int, DocumentStatus, int], bool]


def make_unique_non_empty_strings(strings: Iterable[str]) -> set[str]:
    """Return the set of the non-empty strings among ``strings``."""
    return {str(s) for s in strings if s}


def split_into_words(text: str) -> list[str]:
    """Split on single spaces; consecutive spaces yield empty words."""
    return text.split(" ")


def _is_valid_word(word: str) -> bool:
    return not any(ch < " " for ch in word)


def _average_rating(ratings: Iterable[int]) -> int:
    values = list(ratings)
    if not values:
        return 0
    total = sum(values)
    quotient = abs(total) // len(values)
    return quotient if total >= 0 else -quotient


@dataclass(frozen=True)
class _QueryWord:
    data: str
    is_minus: bool
    is_stop: bool


@dataclass
class _Query:
    plus_words: set[str]
    minus_words: set[str]


@dataclass
class _DocumentData:
    rating: int
    status: DocumentStatus


def _compare_documents(lhs: Document, rhs: Document) -> int:
    if abs(lhs.relevance - rhs.relevance) < EPSILON:
        return (rhs.rating > lhs.rating) - (rhs.rating < lhs.rating)
    return (rhs.relevance > lhs.relevance) - (rhs.relevance < lhs.relevance)


class SearchServer:
    """Indexes documents and answers ranked queries with plus and minus words."""

    INVALID_DOCUMENT_ID = -1

    def __init__(self, stop_words: Union[str, Iterable[str]] = "") -> None:
        if isinstance(stop_words, str):
            stop_words = split_into_words(stop_words)
        self._stop_words = make_unique_non_empty_strings(stop_words)
        if not all(_is_valid_word(word) for word in self._stop_words):
            raise ValueError("wrong stop words")
        self._word_freqs: dict[int, dict[str, float]] = {}
        self._documents: dict[int, _DocumentData] = {}

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._documents))

    def __len__(self) -> int:
        return len(self._documents)

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus,
        ratings: Iterable[int],
    ) -> None:
        """Index ``document`` under ``document_id``."""
        if document_id < 0:
            raise ValueError("try to add document with negative id")
        if document_id in self._documents:
            raise ValueError("duplicate id")
        words = self._split_into_words_no_stop(document)
        if words:
            inv_word_count = 1.0 / len(words)
            freqs: dict[str, float] = {}
            for word in words:
                freqs[word] = freqs.get(word, 0.0) + inv_word_count
            self._word_freqs[document_id] = freqs
        self._documents[document_id] = _DocumentData(_average_rating(ratings), status)

    def find_top_documents(
        self,
        raw_query: str,
        predicate: Union[DocumentStatus, Predicate, None] = None,
    ) -> list[Document]:
        """Return the best matching documents, at most MAX_RESULT_DOCUMENT_COUNT.

        ``predicate`` may be a status to filter by, a callable taking
        (document_id, status, rating), or None for actual documents only.
        """
        if predicate is None:
            predicate = DocumentStatus.ACTUAL
        if isinstance(predicate, DocumentStatus):
            wanted = predicate
            predicate = lambda _id, status, _rating: status == wanted  # noqa: E731
        query = self._parse_query(raw_query)
        matched = self._find_all_documents(query, predicate)
        matched.sort(key=cmp_to_key(_compare_documents))
        return matched[:MAX_RESULT_DOCUMENT_COUNT]

    def match_document(
        self, raw_query: str, document_id: int
    ) -> tuple[list[str], DocumentStatus]:
        """Return the query's plus words found in the document and its status.

        The word list is empty when the document holds any minus word.
        """
        query = self._parse_query(raw_query)
        if document_id not in self._documents:
            raise KeyError(f"unknown document id {document_id}")
        status = self._documents[document_id].status
        freqs = self._word_freqs.get(document_id, {})
        if any(word in freqs for word in query.minus_words):
            return [], status
        return sorted(w for w in query.plus_words if w in freqs), status

    def get_word_frequencies(self, document_id: int) -> dict[str, float]:
        """Return the term frequencies of a document, empty if it is unknown."""
        freqs = self._word_freqs.get(document_id, {})
        return {word: freqs[word] for word in sorted(freqs)}

    def remove_document(self, document_id: int) -> None:
        """Remove a document; unknown ids are ignored."""
        self._word_freqs.pop(document_id, None)
        self._documents.pop(document_id, None)

    def _split_into_words_no_stop(self, text: str) -> list[str]:
        words = []
        for word in split_into_words(text):
            if not _is_valid_word(word):
                raise ValueError("special characters in document word")
            if word not in self._stop_words:
                words.append(word)
        return words

    def _parse_query_word(self, text: str) -> _QueryWord:
        if not text:
            raise ValueError("Empty query")
        is_minus = text.startswith("-")
        if is_minus:
            text = text[1:]
            if not text:
                raise ValueError("Minus word can't be empty")
        if text.startswith("-"):
            raise ValueError("Double minus in minus word")
        if not _is_valid_word(text):
            raise ValueError("special characters in query word")
        return _QueryWord(text, is_minus, text in self._stop_words)

    def _parse_query(self, text: str) -> _Query:
        query = _Query(set(), set())
        for word in split_into_words(text):
            query_word = self._parse_query_word(word)
            if query_word.is_stop:
                continue
            target = query.minus_words if query_word.is_minus else query.plus_words
            target.add(query_word.data)
        return query

    def _find_all_documents(self, query: _Query, predicate: Predicate) -> list[Document]:
        doc_count = len(self._documents)
        document_freq = {
            word: sum(1 for freqs in self._word_freqs.values() if word in freqs)
            for word in query.plus_words
        }
        relevance: dict[int, float] = {}
        for document_id in sorted(self._word_freqs):
            freqs = self._word_freqs[document_id]
            present = [w for w in sorted(query.plus_words) if w in freqs]
            if not present:
                continue
            data = self._documents[document_id]
            if not predicate(document_id, data.status, data.rating):
                continue
            relevance[document_id] = sum(
                math.log(doc_count / document_freq[w]) * freqs[w] for w in present
            )
        for document_id, freqs in self._word_freqs.items():
            if any(word in freqs for word in query.minus_words):
                relevance.pop(document_id, None)
        return [
            Document(document_id, rel, self._documents[document_id].rating)
            for document_id, rel in sorted(relevance.items())
        ]