"""Unit tests for theme module.

Tests for theme loading, validation, and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

from pathlib import Path
from unittest.mock import patch

import advancepurge.core.theme as theme_module
import pytest
from advancepurge.core.theme import (
    ThemeColors,
    _load_toml_colors,
    get_bundled_theme_path,
    get_rich_theme,
    get_theme,
    load_theme,
)
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.muted == "#b2bec3"
        assert colors.error == "#f53263"
        assert colors.kept == "#69B9A1"

    def test_short_hex_accepted(self) -> None:
        """#RGB colours are valid."""
        assert ThemeColors(muted="#abc").muted == "#abc"

    def test_invalid_hex_no_hash(self) -> None:
        """ThemeColors rejects colors without # prefix."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(muted="b2bec3")

    def test_invalid_hex_wrong_length(self) -> None:
        """ThemeColors rejects colors with wrong length."""
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(muted="#ff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects invalid hex characters."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(deleted="#gggggg")

    def test_extra_fields_forbidden(self) -> None:
        """ThemeColors rejects unknown fields."""
        with pytest.raises(ValueError):
            ThemeColors(package_manual="#ffffff")  # type: ignore[call-arg]


class TestLoadTomlColors:
    """Tests for _load_toml_colors internal function."""

    def test_loads_valid_toml(self, tmp_path: Path) -> None:
        """Loads colors from valid TOML file."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\nmuted = "#000000"\nsize = 3\n')

        assert _load_toml_colors(theme_file) == {"muted": "#000000"}

    def test_returns_none_for_missing_file(self, tmp_path: Path) -> None:
        """Missing files yield None."""
        assert _load_toml_colors(tmp_path / "missing.toml") is None

    def test_returns_none_for_invalid_toml(self, tmp_path: Path) -> None:
        """Invalid TOML yields None."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("[colors\nmuted = ")

        assert _load_toml_colors(theme_file) is None

    def test_bundled_theme_readable(self) -> None:
        """The bundled theme ships with the package."""
        colors = _load_toml_colors(get_bundled_theme_path())
        assert colors is not None
        assert "error" in colors


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_user_theme_overrides_bundled(self, tmp_path: Path) -> None:
        """User colours take precedence."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\ninfo = "#123456"\n')

        with patch.object(theme_module, "get_user_theme_path", return_value=user_theme):
            colors = load_theme()

        assert colors.info == "#123456"
        assert colors.muted == "#b2bec3"

    def test_invalid_user_theme_falls_back(self, tmp_path: Path) -> None:
        """An invalid user colour yields the defaults."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\ninfo = "blue"\n')

        with patch.object(theme_module, "get_user_theme_path", return_value=user_theme):
            colors = load_theme()

        assert colors == ThemeColors()


class TestGetRichTheme:
    """Tests for Rich theme generation."""

    def test_includes_purge_styles(self) -> None:
        """Theme defines the styles used by the CLI."""
        theme = get_rich_theme(ThemeColors())
        for style in ("info", "warning", "error", "success", "deleted", "kept", "bold_header"):
            assert style in theme.styles

    def test_get_theme_cached(self) -> None:
        """get_theme returns the same instance on repeated calls."""
        assert isinstance(get_theme(), Theme)
        assert get_theme() is get_theme()
