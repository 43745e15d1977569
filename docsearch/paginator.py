"""Split a sequence into fixed-size pages."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class Paginator(Generic[T]):
    """Pages of at most ``page_size`` items each.

    There is always at least one page: an empty input gives one empty page.
    """

    def __init__(self, items: Iterable[T], page_size: int) -> None:
        if page_size <= 0:
            raise ValueError("page size must be positive")
        values = list(items)
        pages = [
            values[start:start + page_size]
            for start in range(0, len(values), page_size)
        ]
        self._pages: list[list[T]] = pages or [[]]

    def __iter__(self) -> Iterator[list[T]]:
        return (list(page) for page in self._pages)

    def __len__(self) -> int:
        return len(self._pages)


def paginate(items: Iterable[T], page_size: int) -> Paginator[T]:
    """Return a :class:`Paginator` over ``items``."""
    return Paginator(items, page_size)