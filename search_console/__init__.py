"""Search console: query orchestration and result state for a remote search index."""

__version__ = "0.1.0"
