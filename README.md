# docsearch

An in-memory search server that ranks documents by TF-IDF relevance.

Features:

- stop words, dropped from both documents and queries;
- minus words (`-word`), which exclude every document that contains them;
- document statuses (`ACTUAL`, `IRRELEVANT`, `BANNED`, `REMOVED`) and custom filters;
- ratings: each document's rating is the integer mean of its ratings, rounded toward zero (0 when there are none);
- at most five results per query, ordered by relevance and then by rating;
- helpers for pagination, batch queries, duplicate removal and timing.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from docsearch.search_server import SearchServer, DocumentStatus

server = SearchServer("and in on")
server.add_document(0, "white cat and fashion collar", DocumentStatus.ACTUAL, [8, -3])
server.add_document(1, "fluffy cat fluffy tail", DocumentStatus.ACTUAL, [7, 2, 7])
server.add_document(2, "well-groomed dog expressive eyes", DocumentStatus.ACTUAL, [5, -12, 2, 1])

for doc in server.find_top_documents("fluffy well-groomed cat"):
    print(doc.id, doc.relevance, doc.rating)

# Filter by status or with any predicate(document_id, status, rating).
# Without a filter only ACTUAL documents are returned.
server.find_top_documents("cat", DocumentStatus.BANNED)
server.find_top_documents("cat", lambda doc_id, status, rating: rating > 2)

# Query words found in a document, sorted; empty if a minus word matches
words, status = server.match_document("fluffy cat -dog", 1)
```

`SearchServer` takes its stop words either as a space-separated string or as
any iterable of strings. Words are split on single spaces.

A query that contains an empty word (for example from two spaces in a row), a
lone `-`, a word starting with `--`, or control characters raises
`ValueError`. So does adding a document with a negative or repeated id, or
with control characters in its text, and giving stop words that contain
control characters. `match_document` raises `KeyError` for an unknown
document id.

The server can be iterated for its document ids in ascending order, and
`len(server)` gives the number of documents.
`get_word_frequencies(document_id)` returns each word's term frequency in that
document (an empty dict for an unknown id), and
`remove_document(document_id)` removes the document; unknown ids are ignored.

### Helpers

```python
from docsearch.paginator import paginate
from docsearch.process_queries import process_queries, process_queries_joined
from docsearch.remove_duplicates import remove_duplicates
from docsearch.log_duration import LogDuration

# Pages of at most 2 items; an empty input gives one empty page
pages = paginate(server.find_top_documents("cat"), 2)
for page in pages:
    print(page)

results = process_queries(server, ["cat", "dog"])        # one list per query
flat = process_queries_joined(server, ["cat", "dog"])    # all results in one list

# Removes documents whose set of words equals that of a document with a lower
# id, prints "Found duplicate document id N" for each to stdout (or `out`),
# and returns the removed ids.
removed = remove_duplicates(server)

with LogDuration("search"):
    server.find_top_documents("cat")  # prints "Operation time: N ms" to stderr when the block ends
```

`docsearch.cli` also offers `add_document`, `find_top_documents` and
`match_documents`, which print their results (or the `ValueError` they
caught) to a stream, and `format_document` / `format_match_result`, which
render a single line.

## Command line

```
docsearch
```

This runs a fixed demonstration. It indexes six sample documents, one of
which repeats the first, removes the duplicate and prints
`Found duplicate document id 6`. It takes no options besides `--help`.

## Limitations

- The index lives in memory only; nothing is saved to or loaded from disk.
- The command line does not accept documents or queries of its own; searching
  is done through the Python API.