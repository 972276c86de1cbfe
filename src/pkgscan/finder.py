"""Namespace scanning: enumerate modules and dispatch them to an action."""

import logging
from collections.abc import Iterator
from typing import Self

from pkgscan.config import ScanConfig
from pkgscan.exceptions import ActionError
from pkgscan.exceptions import InvalidNamespaceError
from pkgscan.exceptions import NamespaceNotFoundError
from pkgscan.exceptions import PkgscanError
from pkgscan.exceptions import UnitDefinitionMissing
from pkgscan.exceptions import UnitResolutionError
from pkgscan.loader import ImportLoader
from pkgscan.loader import Loader
from pkgscan.models import Action
from pkgscan.models import Predicate
from pkgscan.models import ScanRequest
from pkgscan.models import StorageLocation
from pkgscan.paths import SEPARATOR
from pkgscan.paths import namespace_to_prefix
from pkgscan.paths import unit_path_to_qualified_name
from pkgscan.storage import ArchiveCache
from pkgscan.storage import detect_location
from pkgscan.storage import discover_archive_units
from pkgscan.storage import discover_tree_units

logger = logging.getLogger("pkgscan.finder")


class Finder:
    """Finds the modules of a namespace and applies an action to each.

    Works the same whether the program's modules are loose files in a
    directory tree or entries in an archive on sys.path. The storage location
    is fixed when the finder is created. In archive mode the entry list is
    read once per finder and reused by every scan.

    Example:
        Finder().set_predicate(is_plugin).set_action(register).find("app.plugins")
    """

    def __init__(
        self,
        location: StorageLocation | None = None,
        loader: Loader | None = None,
        config: ScanConfig | None = None,
    ):
        """Create a finder.

        Args:
            location: Where modules are stored. If None, detected from the
                running program (see detect_location).
            loader: Resolves names to modules. If None, uses ImportLoader.
            config: Scan configuration. If None, read from the environment
                (ScanConfig.from_env).

        Raises:
            LocationDetectionError: If location is None and detection fails
        """
        self.config = config if config is not None else ScanConfig.from_env()
        self.location = (
            location if location is not None else detect_location(config=self.config)
        )
        self.loader = loader if loader is not None else ImportLoader()
        self._archive: ArchiveCache | None = None
        if self.location.is_archive:
            self._archive = ArchiveCache(self.location.base)
        self._action: Action | None = None
        self._predicate: Predicate | None = None

    def set_action(self, action: Action | None) -> Self:
        """Set the action performed with each found module.

        Returns:
            This finder, for chaining
        """
        self._action = action
        return self

    def set_predicate(self, predicate: Predicate | None) -> Self:
        """Set the condition a found module must meet for the action to run.

        Returns:
            This finder, for chaining
        """
        self._predicate = predicate
        return self

    def find(self, namespace: str = "", include_subpackages: bool = True) -> None:
        """Apply the action to every module of a namespace.

        Modules whose definition cannot be loaded (UnitDefinitionMissing) are
        skipped. Any other failure stops the scan.

        Args:
            namespace: Dotted package name. "" scans every namespace.
            include_subpackages: If False, only modules directly in namespace

        Raises:
            InvalidNamespaceError: If namespace contains "/" or an empty
                segment (".x", "a..b", "pkg.")
            NamespaceNotFoundError: If namespace does not exist
            StorageIOError: If the archive or directory tree cannot be read
            UnitResolutionError: If a module cannot be resolved
            ActionError: If the action fails for a module
        """
        for name in self.names(namespace, include_subpackages):
            self._dispatch(name)

    def names(
        self, namespace: str = "", include_subpackages: bool = True
    ) -> Iterator[str]:
        """Enumerate qualified module names of a namespace without loading them.

        The namespace is validated immediately; enumeration happens lazily as
        the iterator is consumed.

        Args:
            namespace: Dotted package name. "" lists every namespace.
            include_subpackages: If False, only modules directly in namespace

        Returns:
            One-shot iterator of dotted module names

        Raises:
            InvalidNamespaceError: If namespace contains "/" or an empty
                segment (".x", "a..b", "pkg.")
            NamespaceNotFoundError: If namespace does not exist
            StorageIOError: If the archive or directory tree cannot be read
        """
        request = ScanRequest(namespace, include_subpackages)
        if SEPARATOR in request.namespace:
            raise InvalidNamespaceError(
                f'Namespace cannot contain "{SEPARATOR}": {request.namespace!r}'
            )
        if request.namespace and "" in request.namespace.split("."):
            raise InvalidNamespaceError(
                f"Namespace has an empty segment: {request.namespace!r}"
            )

        prefix = namespace_to_prefix(request.namespace)
        if not self._exists(prefix):
            raise NamespaceNotFoundError(
                f"Namespace '{request.namespace}' does not exist in "
                f"{self.location.base}"
            )

        return self._qualified_names(prefix, request.include_subpackages)

    def _exists(self, prefix: str) -> bool:
        if self._archive is not None:
            # Deliberately looser than an exact directory entry: archives
            # built without directory entries still contain files under the
            # prefix
            return not prefix or any(
                entry.startswith(prefix) for entry in self._archive.entries()
            )
        return (self.location.base / prefix).is_dir()

    def _qualified_names(self, prefix: str, include_subtree: bool) -> Iterator[str]:
        suffix = self.config.unit_suffix
        if self._archive is not None:
            paths = discover_archive_units(
                self._archive.entries(), prefix, include_subtree, suffix
            )
        else:
            paths = discover_tree_units(
                self.location.base, prefix, include_subtree, suffix
            )

        for path in paths:
            name = unit_path_to_qualified_name(path, suffix)
            # A top-level __init__ module has no name of its own
            if name:
                yield name

    def _dispatch(self, name: str) -> None:
        try:
            module = self.loader.resolve(name)
        except UnitDefinitionMissing as e:
            logger.debug("Skipping %s: %s", name, e)
            return
        except PkgscanError:
            raise
        except Exception as e:
            raise UnitResolutionError(name, f"{type(e).__name__}: {e}") from e

        if self._action is None:
            return

        try:
            if self._predicate is None or self._predicate(module):
                self._action(module)
        except ActionError:
            raise
        except Exception as e:
            raise ActionError(name, e) from e
