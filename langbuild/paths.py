# langbuild/paths.py
"""Candidate path resolution and path segment helpers.

Nothing in this module touches the filesystem. Paths are handled as plain
strings so that trees produced on POSIX and Windows hosts resolve to the same
namespace segments.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from .const import LANG_FILE_SUFFIX, SOURCE_ROOT_MARKER

_SEGMENT_SPLIT = re.compile(r"[/\\]+")


def _ensure_trailing_separator(directory: str) -> str:
    """Return ``directory`` ending with exactly one path separator."""

    stripped = directory.rstrip("/\\")
    if len(stripped) < len(directory):
        # Reuse the separator style the caller already chose.
        return stripped + directory[len(stripped)]
    return directory + "/"


def resolve_candidate_paths(language: str, base_dirs: Iterable[str]) -> list[str]:
    """Return ``<dir>/<language>.json`` for every base directory, in order.

    Duplicates are kept; re-ingesting the same file does not change the merge.
    """

    filename = f"{language}{LANG_FILE_SUFFIX}"
    return [_ensure_trailing_separator(directory) + filename for directory in base_dirs]


def split_path_segments(path: str) -> list[str]:
    """Split ``path`` on forward and back slashes, dropping empty and ``.`` parts."""

    return [
        segment for segment in _SEGMENT_SPLIT.split(path) if segment not in ("", ".")
    ]


def relative_source_segments(
    path: str, marker: str = SOURCE_ROOT_MARKER
) -> list[str]:
    """Return the segments of ``path`` that follow the last ``marker`` segment.

    When the marker is absent the whole path is treated as relative.
    """

    segments = split_path_segments(path)
    for index in range(len(segments) - 1, -1, -1):
        if segments[index] == marker:
            return segments[index + 1 :]
    return segments


def component_segments(segments: Sequence[str]) -> list[str]:
    """Drop the filename from relative ``segments``, leaving the component part."""

    return list(segments[:-1])
