# langbuild/exceptions.py
"""Exception types raised or collected while building language files."""

from __future__ import annotations


class LangBuildError(Exception):
    """Base class for every error raised by the language builder."""


class FragmentParseError(LangBuildError):
    """A translation fragment could not be decoded into a JSON object.

    These are collected by the merger and reported, never raised out of a build.
    """

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"Error parsing JSON in {path}: {message}")
        self.path = path
        self.message = message


class InvalidConfigError(LangBuildError):
    """Raised when the build configuration is unreadable or fails validation."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        if source:
            message = f"{source}: {message}"
        super().__init__(message)
        self.source = source
