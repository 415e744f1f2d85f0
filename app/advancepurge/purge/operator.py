"""Directory purge operator.

Deletes the subdirectories of each category's target directories that
are neither protected by the category nor retained by configuration,
or whole target trees when a category is fully enabled.

Traversal uses absolute paths only (the process working directory is
never changed), does not follow symbolic links and stays on the device
of the tree being removed.
"""

import logging
import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from advancepurge.core.paths import get_share_root
from advancepurge.models.config import CATEGORY_ORDER, Category, PurgeConfig, PurgeMode
from advancepurge.purge.models import CategoryReport, PurgeActionResult
from advancepurge.purge.targets import PurgeTarget, get_target
from advancepurge.utils.formatting import print_error, print_info, print_warning

logger = logging.getLogger(__name__)


def _describe(path: str, error: OSError) -> str:
    """Format an OSError with the path it occurred on."""
    return f"{path}: {error.strerror or error}"


@dataclass(slots=True)
class _DirectoryFrame:
    """A directory whose entries are being removed."""

    path: str
    entries: Iterator[os.DirEntry[str]]
    failed: bool = False


def remove_tree(path: str) -> list[str]:
    """Remove a filesystem tree depth-first.

    Directories are emptied and then removed; files, symlinks and other
    nodes are unlinked. Symlinks are never followed and directories on
    another device are not entered. A failed removal is recorded and
    traversal continues with the remaining nodes. Nodes that vanish
    while the tree is being removed count as removed.

    The walk keeps its own stack, so the depth of the tree is not bounded
    by the interpreter's recursion limit.

    Args:
        path: Absolute path of the tree root.

    Returns:
        Messages for every node that could not be removed (empty on success).
    """
    errors: list[str] = []
    try:
        st = os.lstat(path)
    except FileNotFoundError:
        logger.debug("Already gone: %s", path)
        return errors
    except OSError as e:
        return [_describe(path, e)]

    if not stat.S_ISDIR(st.st_mode):
        _remove_node(path, errors)
        return errors

    device = st.st_dev
    stack: list[_DirectoryFrame] = []
    _enter_directory(path, stack, errors)

    while stack:
        frame = stack[-1]
        entry = next(frame.entries, None)

        if entry is None:
            # Every entry has been handled; the directory itself is next
            stack.pop()
            removed = not frame.failed and _remove_empty_directory(frame.path, errors)
            if not removed and stack:
                stack[-1].failed = True
            continue

        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            entry_device = entry.stat(follow_symlinks=False).st_dev if is_dir else device
        except FileNotFoundError:
            logger.debug("Already gone: %s", entry.path)
            continue
        except OSError as e:
            errors.append(_describe(entry.path, e))
            frame.failed = True
            continue

        if not is_dir:
            if not _remove_node(entry.path, errors):
                frame.failed = True
        elif entry_device != device:
            errors.append(f"{entry.path}: on another filesystem, not removed")
            frame.failed = True
        elif not _enter_directory(entry.path, stack, errors):
            frame.failed = True

    return errors


def _enter_directory(path: str, stack: list[_DirectoryFrame], errors: list[str]) -> bool:
    """Read a directory's entries and push it onto the stack.

    Returns:
        False if the directory could not be read, True otherwise
        (including when it no longer exists).
    """
    try:
        with os.scandir(path) as it:
            entries = list(it)
    except FileNotFoundError:
        logger.debug("Already gone: %s", path)
        return True
    except OSError as e:
        errors.append(_describe(path, e))
        return False

    stack.append(_DirectoryFrame(path=path, entries=iter(entries)))
    return True


def _remove_empty_directory(path: str, errors: list[str]) -> bool:
    """Remove an emptied directory, appending a failure to errors."""
    try:
        os.rmdir(path)
    except FileNotFoundError:
        logger.debug("Already gone: %s", path)
    except OSError as e:
        errors.append(_describe(path, e))
        return False
    return True


def _remove_node(path: str, errors: list[str]) -> bool:
    """Unlink a non-directory node, appending a failure to errors."""
    try:
        os.unlink(path)
    except FileNotFoundError:
        logger.debug("Already gone: %s", path)
    except OSError as e:
        errors.append(_describe(path, e))
        return False
    return True


class PurgeOperator:
    """Purges category directories according to a PurgeConfig.

    Attributes:
        _config: Configuration providing modes and retained locales.
        _root: Share root the category directories are resolved under.
        _verbose: If True, print every deletion.
        _dry_run: If True, report deletions without modifying the filesystem.
    """

    def __init__(
        self,
        config: PurgeConfig,
        *,
        local: bool = False,
        verbose: bool = False,
        dry_run: bool = False,
        system_root: Path | None = None,
        local_root: Path | None = None,
    ) -> None:
        """Initialize the PurgeOperator.

        Args:
            config: Configuration to apply.
            local: If True, purge under local_root instead of system_root.
            verbose: If True, print every deletion.
            dry_run: If True, report what would be deleted without deleting.
            system_root: Root of the system share hierarchy (default /usr/share).
            local_root: Root of the local share hierarchy (default /usr/local/share).
        """
        self._config = config
        if local:
            self._root = local_root or get_share_root(local=True)
        else:
            self._root = system_root or get_share_root()
        self._verbose = verbose
        self._dry_run = dry_run

    @property
    def root(self) -> Path:
        """Share root the operator purges under."""
        return self._root

    def run(self) -> list[CategoryReport]:
        """Purge every category in order.

        Returns:
            One CategoryReport per category, including disabled ones.
        """
        return [self.purge_category(category) for category in CATEGORY_ORDER]

    def purge_category(self, category: Category) -> CategoryReport:
        """Purge a category according to its configured mode.

        Args:
            category: Category to purge.

        Returns:
            CategoryReport describing what was done.
        """
        mode = self._config.mode_for(category)
        target = get_target(category)

        if mode == PurgeMode.OFF:
            logger.debug("Skipping %s: purge disabled", category.value)
            return CategoryReport(
                category=category,
                mode=mode,
                targets=tuple(str(p) for p in target.resolve(self._root)),
            )

        if mode == PurgeMode.ON or not target.filterable:
            return self.purge_unconditional(category)
        return self.purge_filtered(category)

    def purge_filtered(self, category: Category) -> CategoryReport:
        """Delete the unprotected subdirectories of a category's directories.

        A subdirectory is kept if it is named '.', '..' or 'C', is on the
        category's exclude-list, or is a retained locale. Entries that are
        not directories (including symlinks to directories) are kept. A
        target directory that cannot be opened is reported and skipped.

        Args:
            category: Category to purge.

        Returns:
            CategoryReport with one result per deleted subdirectory.
        """
        target = get_target(category)
        paths = target.resolve(self._root)
        results: list[PurgeActionResult] = []
        errors: list[str] = []

        for path in paths:
            try:
                candidates = self._list_candidates(path, target)
            except OSError as e:
                msg = f"Cannot open directory {path}: {e.strerror or e}"
                logger.warning(msg)
                print_error(msg)
                errors.append(msg)
                continue

            for candidate in candidates:
                results.append(self._delete(candidate))

        return CategoryReport(
            category=category,
            mode=PurgeMode.FILTER,
            targets=tuple(str(p) for p in paths),
            results=tuple(results),
            errors=tuple(errors),
        )

    def purge_unconditional(self, category: Category) -> CategoryReport:
        """Delete every target directory of a category, including the directory itself.

        Args:
            category: Category to purge.

        Returns:
            CategoryReport with one result per target directory.
        """
        target = get_target(category)
        paths = target.resolve(self._root)
        results: list[PurgeActionResult] = []

        for path in paths:
            path_str = str(path)
            if not os.path.lexists(path_str):
                msg = f"Path does not exist: {path_str}"
                logger.warning(msg)
                print_error(msg)
                results.append(PurgeActionResult(path=path_str, success=False, error=msg))
                continue
            results.append(self._delete(path_str))

        return CategoryReport(
            category=category,
            mode=PurgeMode.ON,
            targets=tuple(str(p) for p in paths),
            results=tuple(results),
        )

    def _list_candidates(self, path: Path, target: PurgeTarget) -> list[str]:
        """List the subdirectories of a target directory that should be deleted.

        The directory handle is closed before anything is deleted.

        Raises:
            OSError: If the directory cannot be opened or read.
        """
        candidates: list[str] = []
        with os.scandir(path) as it:
            for entry in it:
                if target.is_excluded(entry.name) or self._config.is_retained(entry.name):
                    continue
                try:
                    if not entry.is_dir(follow_symlinks=False):
                        continue
                except OSError as e:
                    logger.warning("Cannot determine type of %s: %s", entry.path, e)
                    continue
                candidates.append(entry.path)
        return sorted(candidates)

    def _delete(self, path: str) -> PurgeActionResult:
        """Delete a single tree, isolating failures to this result."""
        if self._verbose:
            print_info(f"Deleting: {path}")

        if self._dry_run:
            logger.info("Dry-run: would delete %s", path)
            return PurgeActionResult(path=path, success=True, dry_run=True)

        errors = remove_tree(path)
        if not errors:
            logger.info("Deleted %s", path)
            return PurgeActionResult(path=path, success=True)

        for error in errors:
            logger.warning("Error removing %s", error)
        summary = errors[0] if len(errors) == 1 else f"{errors[0]} (+{len(errors) - 1} more)"
        print_warning(f"Error removing the directory {path}: {summary}")
        return PurgeActionResult(path=path, success=False, error=summary)
