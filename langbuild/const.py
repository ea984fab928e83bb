# langbuild/const.py
"""Constants for the language file builder.

All constants defined here are intended to be import-safe across the package.
"""

from __future__ import annotations

# --------------------------------------------------------------------------------------
# Core identifiers
# --------------------------------------------------------------------------------------
# Keep the package version aligned with pyproject.toml
VERSION: str = "1.0.0"

# --------------------------------------------------------------------------------------
# Source layout
# --------------------------------------------------------------------------------------
# Segment that marks the top of the source tree; namespaces are derived from
# the path segments that follow it.
SOURCE_ROOT_MARKER: str = "src"
LANG_FILE_SUFFIX: str = ".json"

DEFAULT_LANGUAGES: tuple[str, ...] = ("en",)

# Order matters: later directories win when two fragments produce the same key.
DEFAULT_LANG_PATHS: tuple[str, ...] = (
    "./src/lang/",
    "./src/core/**/lang/",
    "./src/addon/**/lang/",
    "./src/assets/countries/",
    "./src/assets/mimetypes/",
)
DEFAULT_DEST: str = "./src/assets/lang"
DEFAULT_CONFIG_FILE: str = "langbuild.json"

# --------------------------------------------------------------------------------------
# Namespace roots
# --------------------------------------------------------------------------------------
ROOT_LANG: str = "lang"
ROOT_CORE: str = "core"
ROOT_ADDON: str = "addon"
ROOT_ASSETS: str = "assets"

CORE_PREFIX: str = "core"
KEY_SEPARATOR: str = "."
SUBPLUGIN_SEPARATOR: str = "_"

# --------------------------------------------------------------------------------------
# Output
# --------------------------------------------------------------------------------------
JSON_INDENT: int = 4

# --------------------------------------------------------------------------------------
# Config keys
# --------------------------------------------------------------------------------------
CONF_LANGUAGES: str = "languages"
CONF_LANG_PATHS: str = "lang_paths"
CONF_DEST: str = "dest"

# --------------------------------------------------------------------------------------
# CLI exit codes
# --------------------------------------------------------------------------------------
EXIT_OK: int = 0
EXIT_PARSE_ERRORS: int = 1
EXIT_INVALID_CONFIG: int = 2
EXIT_WRITE_ERRORS: int = 3
