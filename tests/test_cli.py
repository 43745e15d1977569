import io

import pytest

from docsearch.cli import (
    add_document,
    find_top_documents,
    format_document,
    format_match_result,
    main,
    match_documents,
)
from docsearch.search_server import Document, DocumentStatus, SearchServer


@pytest.fixture
def server():
    server = SearchServer("and with")
    server.add_document(1, "cat funny and nasty rat", DocumentStatus.ACTUAL, [1, 2])
    server.add_document(2, "funny with curly hair", DocumentStatus.ACTUAL, [3])
    server.add_document(3, "nasty rat with curly hair", DocumentStatus.BANNED, [5])
    return server


def test_format_document():
    assert (
        format_document(Document(1, 0.5, 2))
        == "{ document_id = 1, relevance = 0.5, rating = 2 }"
    )


def test_format_document_uses_six_significant_digits():
    text = format_document(Document(7, 0.65067231, -1))
    assert "relevance = 0.650672," in text
    assert text.endswith("rating = -1 }")


def test_format_match_result_with_words():
    assert (
        format_match_result(3, ["cat", "rat"], DocumentStatus.BANNED)
        == "{ document_id = 3, status = 2, words = cat rat}"
    )


def test_format_match_result_without_words():
    assert (
        format_match_result(3, [], DocumentStatus.ACTUAL)
        == "{ document_id = 3, status = 0, words =}"
    )


def test_add_document_reports_duplicate(server):
    out = io.StringIO()
    assert add_document(server, 1, "dog", DocumentStatus.ACTUAL, [1], out) is False
    assert "duplicate id" in out.getvalue()
    assert "1" in out.getvalue()
    assert len(server) == 3


def test_add_document_success(server):
    out = io.StringIO()
    assert add_document(server, 9, "dog", DocumentStatus.ACTUAL, [1], out) is True
    assert out.getvalue() == ""
    assert 9 in list(server)


def test_find_top_documents_prints_results(server):
    out = io.StringIO()
    find_top_documents(server, "curly rat", out)
    lines = out.getvalue().splitlines()
    assert lines[0].endswith("curly rat")
    expected = [format_document(d) for d in server.find_top_documents("curly rat")]
    assert lines[1:] == expected


def test_find_top_documents_reports_error(server):
    out = io.StringIO()
    find_top_documents(server, "cat --rat", out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 2
    assert "Double minus in minus word" in lines[1]


def test_match_documents_prints_each_document(server):
    out = io.StringIO()
    match_documents(server, "curly -cat", out)
    lines = out.getvalue().splitlines()
    expected = []
    for document_id in server:
        words, status = server.match_document("curly -cat", document_id)
        expected.append(format_match_result(document_id, words, status))
    assert lines[1:] == expected
    assert len(lines) == len(server) + 1


def test_match_documents_reports_error(server):
    out = io.StringIO()
    match_documents(server, "cat -", out)
    assert "Minus word can't be empty" in out.getvalue()


def test_main_removes_duplicate(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Found duplicate document id 6\n"