"""Target directories of each purge category.

This module maps every category to the directories it prunes, relative
to the selected share root, and to the subdirectory names that must
never be deleted regardless of configuration.
"""

from dataclasses import dataclass
from pathlib import Path

from advancepurge.models.config import Category

# Baseline locale kept in every filtered directory
C_LOCALE = "C"

# Entry names never considered for deletion in any filtered directory
ALWAYS_SKIPPED: frozenset[str] = frozenset({".", "..", C_LOCALE})

# Manual page section directories (man1 .. man9)
MANUAL_SECTIONS: tuple[str, ...] = tuple(f"man{n}" for n in range(1, 10))


@dataclass(frozen=True, slots=True)
class PurgeTarget:
    """Directories pruned for one category.

    Attributes:
        category: Category the target belongs to.
        suffixes: Directory paths relative to the share root.
        exclude: Subdirectory names always kept in filter mode.
        filterable: Whether filter mode applies; otherwise any enabled
            mode deletes the whole tree.
    """

    category: Category
    suffixes: tuple[str, ...]
    exclude: frozenset[str] = frozenset()
    filterable: bool = True

    def __post_init__(self) -> None:
        """Validate target data after initialization."""
        if not self.suffixes:
            msg = f"Target for {self.category.value} needs at least one directory"
            raise ValueError(msg)
        for suffix in self.suffixes:
            if Path(suffix).is_absolute():
                msg = f"Target directory must be relative to the share root: {suffix}"
                raise ValueError(msg)

    def resolve(self, root: Path) -> tuple[Path, ...]:
        """Get the absolute target directories under a share root.

        Args:
            root: Share root (/usr/share or /usr/local/share).

        Returns:
            One absolute path per suffix, in table order.
        """
        return tuple(root / suffix for suffix in self.suffixes)

    def is_excluded(self, name: str) -> bool:
        """Check if an entry name is protected for this target."""
        return name in ALWAYS_SKIPPED or name in self.exclude


PURGE_TARGETS: dict[Category, PurgeTarget] = {
    Category.LOCALE: PurgeTarget(Category.LOCALE, ("locale",)),
    Category.MANUAL: PurgeTarget(
        Category.MANUAL,
        ("man",),
        exclude=frozenset(MANUAL_SECTIONS),
    ),
    Category.CUPS: PurgeTarget(
        Category.CUPS,
        ("cups/templates", "cups/locale", "cups/doc-root"),
    ),
    Category.HELP: PurgeTarget(Category.HELP, ("help",), exclude=frozenset({C_LOCALE})),
    Category.DOC: PurgeTarget(Category.DOC, ("doc",), filterable=False),
}


def get_target(category: Category) -> PurgeTarget:
    """Get the purge target of a category."""
    return PURGE_TARGETS[category]
