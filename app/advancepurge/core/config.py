"""Config file reading.

This module parses the line-oriented advancepurge configuration file
into an immutable PurgeConfig:

    [Operations]
    locale = filter
    doc = on
    # comment
    [Locales]
    en
    fr
"""

import logging
from enum import Enum
from pathlib import Path
from typing import TextIO

from advancepurge.core.paths import get_config_path
from advancepurge.models.config import Category, PurgeConfig, PurgeMode
from advancepurge.utils.formatting import print_info

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file does not exist."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


class _Section(Enum):
    """Config file section the parser is currently in."""

    OPERATIONS = "[Operations]"
    LOCALES = "[Locales]"


_SECTION_HEADERS: dict[str, _Section] = {section.value: section for section in _Section}

# Operation values that enable a category; anything else turns it off
_OPERATION_VALUES: dict[str, PurgeMode] = {
    "on": PurgeMode.ON,
    "yes": PurgeMode.ON,
    "filter": PurgeMode.FILTER,
}


def parse_config(stream: TextIO, verbose: bool = False) -> PurgeConfig:
    """Parse configuration lines into a PurgeConfig.

    Blank lines and lines starting with '#' are skipped. Lines before
    the first section header are ignored. Inside [Operations], each
    ``key = value`` line sets the mode of a category (the last
    occurrence wins); inside [Locales], each line is a locale to keep.
    Malformed lines are ignored, never fatal.

    Args:
        stream: Readable text stream positioned at the start of the config.
        verbose: If True, print each applied operation and added locale.

    Returns:
        PurgeConfig with defaults for every category not set in the file.

    Raises:
        ConfigParseError: If the locale list cannot be grown or the stream
            is not valid text.
    """
    modes: dict[str, PurgeMode] = {}
    locales: list[str] = []
    section: _Section | None = None

    try:
        for raw_line in stream:
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue

            header = _SECTION_HEADERS.get(line)
            if header is not None:
                section = header
                continue

            if section is _Section.OPERATIONS:
                _read_operation(line, modes, verbose)
            elif section is _Section.LOCALES:
                locales.append(line)
                logger.debug("Retained locale: %s", line)
                if verbose:
                    print_info(f"Configuration add: {line}")
    except MemoryError as e:
        msg = "Error while allocating the configuration locale"
        raise ConfigParseError(msg) from e
    except UnicodeDecodeError as e:
        msg = f"Config file is not valid text: {e}"
        raise ConfigParseError(msg) from e

    return PurgeConfig(**modes, retained_locales=tuple(locales))


def _read_operation(line: str, modes: dict[str, PurgeMode], verbose: bool) -> None:
    """Apply a single ``key = value`` line of the [Operations] section."""
    key, sep, value = line.partition("=")
    if not sep:
        logger.debug("Ignoring operation line without '=': %r", line)
        return

    key = key.strip()
    try:
        category = Category(key)
    except ValueError:
        logger.debug("Ignoring unknown operation: %r", key)
        return

    mode = _OPERATION_VALUES.get(value.strip(), PurgeMode.OFF)
    modes[category.value] = mode
    logger.debug("Operation %s set to %s", category.value, mode.value)
    if verbose:
        print_info(f"Operation {category.value}: {mode.value}")


def load_config(path: Path | None = None, verbose: bool = False) -> PurgeConfig:
    """Load the configuration from a file.

    Args:
        path: Path to the config file. If None, uses the default config path.
        verbose: If True, print each applied setting while parsing.

    Returns:
        Parsed PurgeConfig.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the config file cannot be parsed.
        ConfigError: If the config file cannot be opened or read.
    """
    config_path = path or get_config_path()

    try:
        with open(config_path, encoding="utf-8") as f:
            return parse_config(f, verbose=verbose)
    except FileNotFoundError as e:
        raise ConfigNotFoundError(f"Config file not found: {config_path}") from e
    except OSError as e:
        reason = e.strerror or str(e)
        raise ConfigError(f"Cannot open config {config_path}: {reason}") from e
