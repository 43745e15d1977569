"""In-memory TF-IDF document search server with pagination, batch-query and duplicate-removal helpers."""

__version__ = "0.1.0"