# tests/helpers/__init__.py
"""Helper utilities for language builder tests."""

from __future__ import annotations

from .source_tree import read_output, write_fragment, write_raw_fragment

__all__ = [
    "read_output",
    "write_fragment",
    "write_raw_fragment",
]
