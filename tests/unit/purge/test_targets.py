"""Tests for category target directories."""

from pathlib import Path

import pytest
from advancepurge.models.config import Category
from advancepurge.purge.targets import (
    ALWAYS_SKIPPED,
    MANUAL_SECTIONS,
    PURGE_TARGETS,
    PurgeTarget,
    get_target,
)


class TestPurgeTargetTable:
    """Tests for the PURGE_TARGETS table."""

    def test_every_category_has_a_target(self) -> None:
        """Each category maps to exactly one target."""
        assert set(PURGE_TARGETS) == set(Category)
        for category, target in PURGE_TARGETS.items():
            assert target.category == category

    def test_locale_target(self) -> None:
        """locale purges <root>/locale with no extra exclusions."""
        target = get_target(Category.LOCALE)
        assert target.suffixes == ("locale",)
        assert target.exclude == frozenset()

    def test_manual_excludes_sections(self) -> None:
        """man1..man9 are protected in <root>/man."""
        target = get_target(Category.MANUAL)
        assert target.suffixes == ("man",)
        assert target.exclude == frozenset(MANUAL_SECTIONS)
        assert MANUAL_SECTIONS == tuple(f"man{n}" for n in range(1, 10))

    def test_cups_has_three_directories(self) -> None:
        """cups purges templates, locale and doc-root."""
        target = get_target(Category.CUPS)
        assert target.suffixes == ("cups/templates", "cups/locale", "cups/doc-root")

    def test_help_excludes_c(self) -> None:
        """help protects the C directory."""
        target = get_target(Category.HELP)
        assert target.suffixes == ("help",)
        assert "C" in target.exclude

    def test_doc_is_not_filterable(self) -> None:
        """doc is only ever deleted as a whole."""
        target = get_target(Category.DOC)
        assert target.suffixes == ("doc",)
        assert target.filterable is False


class TestPurgeTarget:
    """Tests for PurgeTarget dataclass."""

    def test_resolve_under_root(self) -> None:
        """Suffixes are joined to the given root."""
        target = get_target(Category.CUPS)
        resolved = target.resolve(Path("/usr/local/share"))
        assert resolved == (
            Path("/usr/local/share/cups/templates"),
            Path("/usr/local/share/cups/locale"),
            Path("/usr/local/share/cups/doc-root"),
        )

    @pytest.mark.parametrize("name", [".", "..", "C"])
    def test_always_skipped(self, name: str) -> None:
        """., .. and C are excluded for every target."""
        assert name in ALWAYS_SKIPPED
        for target in PURGE_TARGETS.values():
            assert target.is_excluded(name) is True

    def test_is_excluded_uses_exclude_list(self) -> None:
        """Names on the exclude-list are excluded only for their target."""
        assert get_target(Category.MANUAL).is_excluded("man3") is True
        assert get_target(Category.LOCALE).is_excluded("man3") is False
        assert get_target(Category.MANUAL).is_excluded("man10") is False

    def test_empty_suffixes_rejected(self) -> None:
        """A target needs at least one directory."""
        with pytest.raises(ValueError, match="at least one directory"):
            PurgeTarget(Category.LOCALE, ())

    def test_absolute_suffix_rejected(self) -> None:
        """Suffixes must be relative to the root."""
        with pytest.raises(ValueError, match="relative"):
            PurgeTarget(Category.LOCALE, ("/usr/share/locale",))

    def test_is_frozen(self) -> None:
        """PurgeTarget is immutable."""
        target = get_target(Category.LOCALE)
        with pytest.raises(AttributeError):
            target.suffixes = ("other",)  # type: ignore[misc]
