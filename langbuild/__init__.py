# langbuild/__init__.py
"""Merge per-component translation files into one JSON file per language."""

from __future__ import annotations

from .const import VERSION as __version__
from .exceptions import FragmentParseError, InvalidConfigError, LangBuildError
from .merger import LangMerger
from .namespace import prefix_for
from .paths import resolve_candidate_paths

__all__ = [
    "__version__",
    "FragmentParseError",
    "InvalidConfigError",
    "LangBuildError",
    "LangMerger",
    "prefix_for",
    "resolve_candidate_paths",
]
