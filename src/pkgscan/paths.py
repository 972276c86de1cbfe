"""Namespace/path translation and subtree matching.

Paths here are always "/"-separated strings relative to the base location,
the form zip entry names take. Directory-tree paths are converted with
Path.as_posix() before reaching these functions.
"""

from pkgscan.config import UNIT_SUFFIX

SEPARATOR = "/"
PACKAGE_MODULE = "__init__"


def namespace_to_prefix(namespace: str) -> str:
    """Convert a dotted namespace to its path prefix.

    Args:
        namespace: Dotted package name, or "" for the root namespace

    Returns:
        "" for the root namespace, otherwise e.g. "pkg/sub/" for "pkg.sub"
    """
    if not namespace:
        return ""
    return namespace.replace(".", SEPARATOR) + SEPARATOR


def prefix_to_namespace(prefix: str) -> str:
    """Convert a path prefix back to its dotted namespace."""
    return prefix.removesuffix(SEPARATOR).replace(SEPARATOR, ".")


def unit_path_to_qualified_name(path: str, suffix: str = UNIT_SUFFIX) -> str:
    """Convert a unit's storage path to its fully qualified module name.

    A package's __init__ module is named after the package itself, so
    "pkg/__init__.py" becomes "pkg" and a top-level "__init__.py" becomes "".

    Args:
        path: "/"-separated path ending with suffix
        suffix: Unit file suffix to strip

    Returns:
        Dotted module name
    """
    parts = path.removesuffix(suffix).split(SEPARATOR)
    if parts[-1] == PACKAGE_MODULE:
        parts.pop()
    return ".".join(parts)


def qualified_name_to_unit_path(name: str, suffix: str = UNIT_SUFFIX) -> str:
    """Convert a dotted module name to the storage path of its unit file."""
    return name.replace(".", SEPARATOR) + suffix


def parent_path(entry: str) -> str:
    """Get everything up to and including the last separator of an entry.

    Returns:
        "" for top-level entries
    """
    return entry[: entry.rfind(SEPARATOR) + 1]


def matches(entry_parent: str, prefix: str, include_subtree: bool) -> bool:
    """Check if an entry's parent path falls under a namespace prefix.

    Args:
        entry_parent: Parent path of the candidate entry (see parent_path)
        prefix: Namespace prefix (see namespace_to_prefix)
        include_subtree: If True, also accept entries in nested namespaces

    Returns:
        True if entry_parent equals prefix, or lies below it when
        include_subtree is set
    """
    if entry_parent == prefix:
        return True
    return include_subtree and entry_parent.startswith(prefix)
