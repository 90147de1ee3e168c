"""Filesystem-backed document storage.

The `engine.py` module owns every read, write and rename beneath the
documents root; `paths.py` holds the path-sanitization policy shared by
all handlers and `json_io.py` the strict JSON decode / pretty-print pair.
"""

from .engine import DocumentStore

__all__ = ["DocumentStore"]
