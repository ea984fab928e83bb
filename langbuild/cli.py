# langbuild/cli.py
"""Command line entry point for merging language files."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import voluptuous as vol

from .config import NON_EMPTY_STR, BuildConfig, load_config
from .const import (
    DEFAULT_CONFIG_FILE,
    EXIT_INVALID_CONFIG,
    EXIT_OK,
    EXIT_PARSE_ERRORS,
    EXIT_WRITE_ERRORS,
)
from .exceptions import InvalidConfigError
from .runner import LanguageBuildResult, build_languages

_LOGGER = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _non_empty(value: str) -> str:
    try:
        return NON_EMPTY_STR(value)
    except vol.Invalid as err:
        raise argparse.ArgumentTypeError("value must not be empty") from err


def _resolve_config(config_path: Path | None) -> BuildConfig:
    """Load ``config_path``, or the default file when it exists, or defaults."""

    if config_path is not None:
        return load_config(config_path)

    default_path = Path(DEFAULT_CONFIG_FILE)
    if default_path.is_file():
        _LOGGER.debug("Using configuration from %s", default_path)
        return load_config(default_path)
    return BuildConfig()


def format_summary(result: LanguageBuildResult) -> str:
    """Return a one-line summary for ``result``."""

    if result.written:
        line = (
            f"{result.language}: wrote {result.output_path} "
            f"({result.fragment_count} fragment(s))"
        )
    elif result.write_error is None:
        line = f"{result.language}: no translation files found, skipped"
    else:
        line = f"{result.language}: cannot write output ({result.write_error})"
    if result.errors:
        line += f", {len(result.errors)} file(s) failed to parse"
    return line


def main(argv: Sequence[str] | None = None) -> int:
    """Merge the configured language files and return the exit status."""

    parser = argparse.ArgumentParser(
        description=(
            "Merge per-component <language>.json files into one key-sorted"
            " file per language, prefixing every key with its component."
        )
    )
    parser.add_argument(
        "--config",
        type=Path,
        help=f"JSON configuration file (defaults to ./{DEFAULT_CONFIG_FILE} if present).",
    )
    parser.add_argument(
        "--lang",
        dest="languages",
        action="append",
        type=_non_empty,
        metavar="CODE",
        help="Language code to build; repeat for several languages.",
    )
    parser.add_argument(
        "--path",
        dest="lang_paths",
        action="append",
        type=_non_empty,
        metavar="DIR",
        help=(
            "Directory (glob patterns allowed) holding <language>.json files;"
            " repeat in override order, later directories win."
        ),
    )
    parser.add_argument(
        "--dest",
        type=Path,
        help="Directory receiving the merged <language>.json files.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    _configure_logging(args.verbose)

    try:
        config = _resolve_config(args.config)
    except InvalidConfigError as err:
        print(f"Invalid configuration: {err}", file=sys.stderr)
        return EXIT_INVALID_CONFIG

    config = config.with_overrides(
        languages=args.languages, lang_paths=args.lang_paths, dest=args.dest
    )

    results = build_languages(config.languages, config.lang_paths, config.dest)

    for result in results:
        print(format_summary(result))

    if any(result.write_error is not None for result in results):
        return EXIT_WRITE_ERRORS
    if any(not result.ok for result in results):
        return EXIT_PARSE_ERRORS
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
