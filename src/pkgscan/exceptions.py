"""Custom exceptions for pkgscan."""


class PkgscanError(Exception):
    """Base exception for pkgscan."""


class InvalidNamespaceError(PkgscanError, ValueError):
    """Namespace argument is malformed (contains a path separator)."""


class NamespaceNotFoundError(PkgscanError):
    """Namespace does not exist at the scanned location."""


class StorageIOError(PkgscanError):
    """Archive or directory tree could not be read."""


class LocationDetectionError(PkgscanError):
    """Base location of the running program could not be determined."""


class UnitResolutionError(PkgscanError):
    """A qualified name could not be resolved to a module."""

    def __init__(self, name: str, reason: str):
        self.name = name
        super().__init__(f"Cannot resolve '{name}': {reason}")


class UnitDefinitionMissing(PkgscanError):
    """A module exists but its definition cannot be loaded (stale or partial tree).

    Raised by loaders and swallowed by Finder.find(), which skips the unit.
    """

    def __init__(self, name: str, missing: str | None = None):
        self.name = name
        self.missing = missing
        detail = f" (missing {missing})" if missing else ""
        super().__init__(f"Definition of '{name}' is unavailable{detail}")


class ActionError(PkgscanError):
    """The registered action failed for a unit."""

    def __init__(self, name: str, error: BaseException):
        self.name = name
        self.error = error
        super().__init__(f"Action failed for '{name}': {error}")
