"""tests/conftest.py: Common fixtures for the language builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers import write_fragment


@pytest.fixture
def source_root(tmp_path: Path) -> Path:
    """Return an empty ``src`` directory inside the temporary project."""

    root = tmp_path / "project" / "src"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def dest_dir(tmp_path: Path) -> Path:
    """Return the (not yet created) output directory."""

    return tmp_path / "project" / "src" / "assets" / "lang"


@pytest.fixture
def moodle_tree(source_root: Path) -> Path:
    """Populate ``source_root`` with one fragment per namespace kind."""

    write_fragment(source_root, "lang/en.json", {"yes": "Yes", "no": "No"})
    write_fragment(source_root, "core/settings/lang/en.json", {"general": "General"})
    write_fragment(source_root, "addon/mod_assign/lang/en.json", {"grade": "Grade"})
    write_fragment(
        source_root,
        "addon/mod_assign/feedback/comments/lang/en.json",
        {"pluginname": "Feedback comments"},
    )
    write_fragment(source_root, "assets/countries/en.json", {"ES": "Spain"})
    write_fragment(source_root, "lang/es.json", {"yes": "Sí"})
    return source_root


@pytest.fixture
def lang_paths(source_root: Path) -> list[str]:
    """Return the conventional directory list rooted at ``source_root``."""

    base = source_root.as_posix()
    return [
        f"{base}/lang/",
        f"{base}/core/**/lang/",
        f"{base}/addon/**/lang/",
        f"{base}/assets/countries/",
        f"{base}/assets/mimetypes/",
    ]
