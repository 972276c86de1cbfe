"""Unit discovery in archives and directory trees."""

from collections.abc import Iterable
from collections.abc import Iterator
from pathlib import Path

from pkgscan.exceptions import StorageIOError
from pkgscan.paths import matches
from pkgscan.paths import parent_path


def discover_archive_units(
    entries: Iterable[str], prefix: str, include_subtree: bool, suffix: str
) -> Iterator[str]:
    """Discover unit files among archive entries.

    Args:
        entries: Archive entry names, in archive order
        prefix: Namespace prefix to match (see namespace_to_prefix)
        include_subtree: If True, include units in nested namespaces
        suffix: Unit file suffix

    Yields:
        Matching entry names, in archive order
    """
    for entry in entries:
        if entry.endswith(suffix) and matches(
            parent_path(entry), prefix, include_subtree
        ):
            yield entry


def discover_tree_units(
    base: Path, prefix: str, include_subtree: bool, suffix: str
) -> Iterator[str]:
    """Discover unit files in a directory tree.

    Walks top-down from base/prefix, entering subdirectories only when
    include_subtree is set. Symlinks to directories are not followed.

    Args:
        base: Root directory of the tree
        prefix: Namespace prefix of the starting directory
        include_subtree: If True, include every nested directory
        suffix: Unit file suffix

    Yields:
        "/"-separated unit paths relative to base. Sorted per directory for
        deterministic output (depth-first, files before subdirectories).

    Raises:
        StorageIOError: If a directory cannot be listed
    """
    try:
        for dirpath, dirnames, filenames in (base / prefix).walk(on_error=_reraise):
            if include_subtree:
                dirnames.sort()
            else:
                dirnames.clear()

            for filename in sorted(filenames):
                if filename.endswith(suffix):
                    yield (dirpath / filename).relative_to(base).as_posix()
    except OSError as e:
        raise StorageIOError(f"Cannot read directory tree {base}: {e}") from e


def _reraise(error: OSError) -> None:
    raise error
