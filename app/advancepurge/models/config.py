"""Configuration models for directory purging.

This module defines the purge categories, the tri-state purge mode
and the immutable configuration value consulted by the purge engine.
"""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class PurgeMode(str, Enum):
    """How a category's directories are pruned.

    Attributes:
        OFF: Leave the category untouched.
        ON: Delete the whole target tree without filtering.
        FILTER: Delete only subdirectories that are not protected.
    """

    OFF = "off"
    ON = "on"
    FILTER = "filter"


class Category(str, Enum):
    """Purge subject, named by its key in the [Operations] section.

    Attributes:
        LOCALE: Translated message catalogs.
        MANUAL: Translated manual pages.
        CUPS: Print system templates, locales and web documentation.
        HELP: Application help files.
        DOC: Generic package documentation.
    """

    LOCALE = "locale"
    MANUAL = "manual"
    CUPS = "cups"
    HELP = "help"
    DOC = "doc"


# Order in which categories are processed during a run
CATEGORY_ORDER: tuple[Category, ...] = (
    Category.LOCALE,
    Category.CUPS,
    Category.MANUAL,
    Category.HELP,
    Category.DOC,
)


class PurgeConfig(BaseModel):
    """Immutable purge configuration.

    Holds one purge mode per category and the locales the user wants
    to keep. Field names match the [Operations] keys of the config file.

    Attributes:
        locale: Mode for the locale category.
        manual: Mode for the manual pages category.
        cups: Mode for the print system category.
        help: Mode for the help category.
        doc: Mode for the generic documentation category.
        retained_locales: Locale names never deleted, in file order.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    locale: PurgeMode = PurgeMode.FILTER
    manual: PurgeMode = PurgeMode.FILTER
    cups: PurgeMode = PurgeMode.FILTER
    help: PurgeMode = PurgeMode.FILTER
    doc: PurgeMode = PurgeMode.ON
    retained_locales: Annotated[
        tuple[str, ...],
        Field(description="Locale names to keep, in file order"),
    ] = ()

    def mode_for(self, category: Category) -> PurgeMode:
        """Get the purge mode configured for a category."""
        mode: PurgeMode = getattr(self, category.value)
        return mode

    def is_retained(self, name: str) -> bool:
        """Check if a directory name is one of the retained locales.

        The comparison is exact and case-sensitive.

        Args:
            name: Directory entry name to check.

        Returns:
            True if the name matches a retained locale.
        """
        return name in self.retained_locales
