# langbuild/namespace.py
"""Namespace prefixes derived from the component a fragment belongs to."""

from __future__ import annotations

from collections.abc import Sequence

from .const import (
    CORE_PREFIX,
    KEY_SEPARATOR,
    ROOT_ADDON,
    ROOT_ASSETS,
    ROOT_CORE,
    ROOT_LANG,
    SUBPLUGIN_SEPARATOR,
)


def _core_prefix(segments: Sequence[str]) -> str | None:
    if len(segments) < 2:
        return None
    if segments[1] == ROOT_LANG:
        return CORE_PREFIX
    return f"{CORE_PREFIX}{KEY_SEPARATOR}{segments[1]}"


def _addon_prefix(segments: Sequence[str]) -> str | None:
    parts = list(segments[1:])
    if parts and parts[-1] == ROOT_LANG:
        parts.pop()
    if not parts:
        return None
    # Subplugins join every folder: addon/mod_assign/feedback/comments -> mod_assign_feedback_comments.
    return f"{ROOT_ADDON}{KEY_SEPARATOR}{SUBPLUGIN_SEPARATOR.join(parts)}"


def _assets_prefix(segments: Sequence[str]) -> str | None:
    if len(segments) < 2:
        return None
    return f"{ROOT_ASSETS}{KEY_SEPARATOR}{segments[1]}"


def prefix_for(segments: Sequence[str]) -> str | None:
    """Return the namespace prefix for a fragment's component segments.

    Args:
        segments: Path segments relative to the source root with the filename
            already removed, e.g. ``["addon", "mod_assign", "lang"]``.

    Returns:
        The dotted prefix (``"addon.mod_assign"``), or ``None`` when the root
        segment is not a known namespace. Fragments without a prefix are not
        merged.
    """

    if not segments:
        return None

    root = segments[0]
    if root == ROOT_LANG:
        return CORE_PREFIX
    if root == ROOT_CORE:
        return _core_prefix(segments)
    if root == ROOT_ADDON:
        return _addon_prefix(segments)
    if root == ROOT_ASSETS:
        return _assets_prefix(segments)
    return None
