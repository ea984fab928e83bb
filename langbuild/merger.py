# langbuild/merger.py
"""Fold translation fragments into a single prefixed, key-sorted table.

The merger is fed one ``(path, content)`` pair per candidate file, in the order
the candidates were resolved. That order decides collisions: when two
fragments produce the same fully qualified key the one ingested last wins.
Reads may happen concurrently elsewhere, but ``ingest`` must be called in
candidate order.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from typing import Any

from .const import JSON_INDENT, KEY_SEPARATOR, SOURCE_ROOT_MARKER
from .exceptions import FragmentParseError
from .namespace import prefix_for
from .paths import component_segments, relative_source_segments

_LOGGER = logging.getLogger(__name__)


def _decode(content: bytes | str) -> str:
    if isinstance(content, bytes):
        # utf-8-sig strips a BOM left behind by some editors.
        return content.decode("utf-8-sig")
    return content


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not valid JSON")


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"number {literal} is out of range")
    return value


class LangMerger:
    """Accumulate the fragments of one language and serialize the result."""

    def __init__(self, *, source_root: str = SOURCE_ROOT_MARKER) -> None:
        self._source_root = source_root
        self._table: dict[str, Any] = {}
        self._fragment_count = 0
        self._has_content = False
        self.errors: list[FragmentParseError] = []

    @property
    def fragment_count(self) -> int:
        """Number of fragments whose keys were merged."""
        return self._fragment_count

    @property
    def has_content(self) -> bool:
        """Whether any non-empty candidate file was ingested, merged or not."""
        return self._has_content

    @property
    def merged(self) -> dict[str, Any]:
        """Return a copy of the table in ingestion order."""
        return dict(self._table)

    def prefix_for_path(self, path: str) -> str | None:
        """Return the namespace prefix for a fragment located at ``path``."""
        segments = relative_source_segments(path, self._source_root)
        return prefix_for(component_segments(segments))

    def ingest(self, path: str, content: bytes | str | None) -> None:
        """Merge the fragment read from ``path``.

        ``content`` is ``None`` for candidates that do not exist. Missing and
        blank files are skipped silently; malformed ones are logged, recorded
        in :attr:`errors` and skipped.
        """

        if content is None:
            return

        try:
            text = _decode(content)
        except UnicodeDecodeError as err:
            self._has_content = True
            self._record_error(path, str(err))
            return

        if not text.strip():
            return
        self._has_content = True

        try:
            fragment = json.loads(
                text,
                parse_constant=_reject_constant,
                parse_float=_parse_finite_float,
            )
        except ValueError as err:
            self._record_error(path, str(err))
            return

        if not isinstance(fragment, Mapping):
            self._record_error(
                path, f"expected a JSON object, got {type(fragment).__name__}"
            )
            return

        try:
            json.dumps(fragment, ensure_ascii=False).encode("utf-8")
        except UnicodeEncodeError as err:
            self._record_error(path, f"not encodable as UTF-8: {err}")
            return

        prefix = self.prefix_for_path(path)
        if prefix is None:
            _LOGGER.debug("No namespace for %s; its keys are not merged", path)
            return

        for key, value in fragment.items():
            self._table[f"{prefix}{KEY_SEPARATOR}{key}"] = value
        self._fragment_count += 1

    def finalize(self) -> bytes:
        """Serialize the table with keys in ascending order.

        Returns UTF-8 encoded, newline-terminated JSON indented by four spaces.
        An empty table serializes as ``{}``.
        """

        ordered = {key: self._table[key] for key in sorted(self._table)}
        serialized = json.dumps(ordered, indent=JSON_INDENT, ensure_ascii=False)
        return f"{serialized}\n".encode("utf-8")

    def _record_error(self, path: str, message: str) -> None:
        error = FragmentParseError(path, message)
        _LOGGER.error("%s", error)
        self.errors.append(error)
