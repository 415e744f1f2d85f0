"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest

SAMPLE_CONFIG = """\
[Operations]
locale = filter
manual = filter
cups   = filter
help   = filter
doc    = on
# comment lines start with '#'
[Locales]
en
en_US
fr
"""


def _populate(directory: Path, names: list[str]) -> None:
    """Create one subdirectory per name, each holding a nested file."""
    for name in names:
        sub = directory / name / "LC_MESSAGES"
        sub.mkdir(parents=True)
        (sub / "app.mo").write_bytes(b"\x00catalog")


@pytest.fixture
def sample_config_text() -> str:
    """Well-formed config file content."""
    return SAMPLE_CONFIG


@pytest.fixture
def config_file(tmp_path: Path, sample_config_text: str) -> Path:
    """Config file on disk with the sample content."""
    path = tmp_path / "advancepurge.conf"
    path.write_text(sample_config_text)
    return path


@pytest.fixture
def share_root(tmp_path: Path) -> Path:
    """Share directory tree resembling /usr/share.

    Layout:
        locale/   en en_US fr de C + README file
        man/      man1..man9 es fr C
        cups/     templates/{de,fr} locale/{de,es} doc-root/{de,fr}
        help/     C fr de
        doc/      pkg-a pkg-b + changelog file
    """
    root = tmp_path / "share"

    locale = root / "locale"
    _populate(locale, ["en", "en_US", "fr", "de", "C"])
    (locale / "README").write_text("locale catalogs")

    man = root / "man"
    _populate(man, [f"man{n}" for n in range(1, 10)] + ["es", "fr", "C"])

    _populate(root / "cups" / "templates", ["de", "fr"])
    _populate(root / "cups" / "locale", ["de", "es"])
    _populate(root / "cups" / "doc-root", ["de", "fr"])

    _populate(root / "help", ["C", "fr", "de"])

    doc = root / "doc"
    _populate(doc, ["pkg-a", "pkg-b"])
    (doc / "changelog").write_text("changes")

    return root
