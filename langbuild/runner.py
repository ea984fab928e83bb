# langbuild/runner.py
"""Build the merged language files for one or more languages.

Candidate files are read concurrently in worker threads, then fed to a
:class:`~langbuild.merger.LangMerger` strictly in candidate order so that the
last configured directory wins key collisions.
"""

from __future__ import annotations

import asyncio
import glob
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .const import LANG_FILE_SUFFIX
from .exceptions import FragmentParseError
from .merger import LangMerger
from .paths import resolve_candidate_paths

_LOGGER = logging.getLogger(__name__)


@dataclass
class LanguageBuildResult:
    """Outcome of building one language file."""

    language: str
    output_path: Path | None = None
    fragment_count: int = 0
    errors: list[FragmentParseError] = field(default_factory=list)
    write_error: OSError | None = None

    @property
    def written(self) -> bool:
        """Whether an output file was written."""
        return self.output_path is not None

    @property
    def ok(self) -> bool:
        """Whether every fragment parsed cleanly and the output was stored."""
        return not self.errors and self.write_error is None


def expand_candidate_paths(paths: Iterable[str]) -> list[str]:
    """Expand glob patterns among ``paths`` while keeping the list order.

    Patterns are expanded recursively (``**`` allowed) and their matches
    sorted; plain paths pass through whether or not they exist.
    """

    expanded: list[str] = []
    for path in paths:
        if glob.escape(path) != path:
            expanded.extend(sorted(glob.glob(path, recursive=True)))
        else:
            expanded.append(path)
    return expanded


def read_fragment(path: str) -> bytes | None:
    """Return the raw bytes at ``path`` or ``None`` when it is not a file."""

    candidate = Path(path)
    if not candidate.is_file():
        return None
    return candidate.read_bytes()


async def async_read_fragments(paths: Sequence[str]) -> list[bytes | None]:
    """Read all ``paths`` concurrently; results follow the order of ``paths``."""

    return list(
        await asyncio.gather(*(asyncio.to_thread(read_fragment, p) for p in paths))
    )


def write_output(dest: Path, language: str, payload: bytes) -> Path:
    """Write ``payload`` to ``<dest>/<language>.json`` and return the path."""

    dest.mkdir(parents=True, exist_ok=True)
    output_path = dest / f"{language}{LANG_FILE_SUFFIX}"
    output_path.write_bytes(payload)
    return output_path


async def async_build_language(
    language: str, base_dirs: Sequence[str], dest: str | Path
) -> LanguageBuildResult:
    """Merge every fragment of ``language`` found under ``base_dirs`` into ``dest``.

    Writing is skipped when none of the candidate files exist or all of them
    are blank, so a stale empty file is never produced.
    """

    candidates = expand_candidate_paths(resolve_candidate_paths(language, base_dirs))
    contents = await async_read_fragments(candidates)

    merger = LangMerger()
    for path, content in zip(candidates, contents):
        merger.ingest(path, content)

    result = LanguageBuildResult(
        language=language,
        fragment_count=merger.fragment_count,
        errors=list(merger.errors),
    )

    if not merger.has_content:
        _LOGGER.debug("No translation files found for '%s'; nothing written", language)
        return result

    try:
        output_path = await asyncio.to_thread(
            write_output, Path(dest), language, merger.finalize()
        )
    except OSError as err:
        _LOGGER.error("Cannot write %s output to %s: %s", language, dest, err)
        result.write_error = err
        return result
    _LOGGER.info(
        "Wrote %s (%d fragment(s) merged)", output_path, merger.fragment_count
    )
    result.output_path = output_path
    return result


async def async_build_languages(
    languages: Sequence[str], base_dirs: Sequence[str], dest: str | Path
) -> list[LanguageBuildResult]:
    """Build every language concurrently; results follow ``languages`` order."""

    return list(
        await asyncio.gather(
            *(async_build_language(lang, base_dirs, dest) for lang in languages)
        )
    )


def build_languages(
    languages: Sequence[str], base_dirs: Sequence[str], dest: str | Path
) -> list[LanguageBuildResult]:
    """Synchronous wrapper around :func:`async_build_languages`."""

    return asyncio.run(async_build_languages(languages, base_dirs, dest))
