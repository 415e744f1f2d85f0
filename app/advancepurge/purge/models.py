"""Result models for purge operations."""

from dataclasses import dataclass

from advancepurge.models.config import Category, PurgeMode


@dataclass(frozen=True, slots=True)
class PurgeActionResult:
    """Result of deleting a single directory tree.

    Attributes:
        path: Absolute path of the deleted tree.
        success: Whether every node of the tree was removed.
        error: Error message if any removal failed, None otherwise.
        dry_run: Whether this was a dry-run (no actual deletion).
    """

    path: str
    success: bool
    error: str | None = None
    dry_run: bool = False


@dataclass(frozen=True, slots=True)
class CategoryReport:
    """Outcome of purging one category.

    Attributes:
        category: Category that was processed.
        mode: Purge mode that was applied.
        targets: Absolute target directories of the category.
        results: One result per deleted tree.
        errors: Target-level errors (e.g. a directory that cannot be opened).
    """

    category: Category
    mode: PurgeMode
    targets: tuple[str, ...] = ()
    results: tuple[PurgeActionResult, ...] = ()
    errors: tuple[str, ...] = ()

    @property
    def deleted_count(self) -> int:
        """Number of trees deleted (or that would be, in dry-run)."""
        return sum(1 for r in self.results if r.success)

    @property
    def failed_count(self) -> int:
        """Number of trees that could not be fully deleted."""
        return sum(1 for r in self.results if not r.success)

    @property
    def has_failures(self) -> bool:
        """Check if anything went wrong for this category."""
        return bool(self.errors) or self.failed_count > 0

    @property
    def skipped(self) -> bool:
        """Check if the category was left untouched by configuration."""
        return self.mode == PurgeMode.OFF
