import pytest

from docsearch.paginator import Paginator, paginate


@pytest.mark.parametrize("count,size", [(10, 3), (6, 3), (1, 5), (7, 1), (5, 5)])
def test_pages_concatenate_to_input(count, size):
    items = list(range(count))
    pages = list(paginate(items, size))
    assert [x for page in pages for x in page] == items


@pytest.mark.parametrize("count,size", [(10, 3), (6, 3), (1, 5), (7, 1)])
def test_page_sizes(count, size):
    pages = list(Paginator(range(count), size))
    assert all(len(page) == size for page in pages[:-1])
    assert 1 <= len(pages[-1]) <= size


def test_len_matches_iteration():
    paginator = paginate("abcdefgh", 3)
    assert len(paginator) == len(list(paginator))


def test_exact_division():
    assert list(paginate(range(6), 3)) == [[0, 1, 2], [3, 4, 5]]


def test_empty_input_gives_one_empty_page():
    paginator = paginate([], 2)
    assert list(paginator) == [[]]
    assert len(paginator) == 1


def test_pages_are_independent_copies():
    paginator = paginate([1, 2, 3], 2)
    first = next(iter(paginator))
    first.append(99)
    assert next(iter(paginator)) == [1, 2]


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_page_size(size):
    with pytest.raises(ValueError):
        Paginator([1, 2], size)