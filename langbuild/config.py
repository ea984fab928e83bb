# langbuild/config.py
"""Build configuration: which languages to merge, from where, and into where."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import voluptuous as vol

from .const import (
    CONF_DEST,
    CONF_LANG_PATHS,
    CONF_LANGUAGES,
    DEFAULT_DEST,
    DEFAULT_LANG_PATHS,
    DEFAULT_LANGUAGES,
)
from .exceptions import InvalidConfigError

NON_EMPTY_STR = vol.All(str, vol.Length(min=1))

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_LANGUAGES, default=list(DEFAULT_LANGUAGES)): vol.All(
            [NON_EMPTY_STR], vol.Length(min=1)
        ),
        vol.Optional(CONF_LANG_PATHS, default=list(DEFAULT_LANG_PATHS)): [
            NON_EMPTY_STR
        ],
        vol.Optional(CONF_DEST, default=DEFAULT_DEST): NON_EMPTY_STR,
    },
    extra=vol.PREVENT_EXTRA,
)


@dataclass(frozen=True)
class BuildConfig:
    """Validated build settings."""

    languages: tuple[str, ...] = DEFAULT_LANGUAGES
    lang_paths: tuple[str, ...] = DEFAULT_LANG_PATHS
    dest: Path = Path(DEFAULT_DEST)

    def with_overrides(
        self,
        *,
        languages: Sequence[str] | None = None,
        lang_paths: Sequence[str] | None = None,
        dest: str | Path | None = None,
    ) -> BuildConfig:
        """Return a copy with every non-empty override applied."""
        changes: dict[str, Any] = {}
        if languages:
            changes["languages"] = tuple(languages)
        if lang_paths:
            changes["lang_paths"] = tuple(lang_paths)
        if dest:
            changes["dest"] = Path(dest)
        return replace(self, **changes)


def build_config(data: Mapping[str, Any], *, source: str | None = None) -> BuildConfig:
    """Validate ``data`` against :data:`CONFIG_SCHEMA` and return a ``BuildConfig``."""

    try:
        validated = CONFIG_SCHEMA(dict(data))
    except vol.Invalid as err:
        raise InvalidConfigError(str(err), source=source) from err

    return BuildConfig(
        languages=tuple(validated[CONF_LANGUAGES]),
        lang_paths=tuple(validated[CONF_LANG_PATHS]),
        dest=Path(validated[CONF_DEST]),
    )


def load_config(path: str | Path) -> BuildConfig:
    """Load and validate a JSON configuration file."""

    config_path = Path(path)
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as err:
        raise InvalidConfigError(
            f"cannot read config: {err.strerror or err}", source=str(config_path)
        ) from err
    except json.JSONDecodeError as err:
        raise InvalidConfigError(
            f"invalid JSON: {err}", source=str(config_path)
        ) from err

    if not isinstance(raw, Mapping):
        raise InvalidConfigError(
            "top level must be a JSON object", source=str(config_path)
        )
    return build_config(raw, source=str(config_path))
