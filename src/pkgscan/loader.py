"""Resolution of qualified names to modules."""

import importlib
from types import ModuleType
from typing import Protocol

from pkgscan.exceptions import UnitDefinitionMissing
from pkgscan.exceptions import UnitResolutionError


class Loader(Protocol):
    """Resolves a qualified name to a module handle.

    Implementations raise UnitDefinitionMissing when the unit exists but its
    definition cannot be loaded, and UnitResolutionError for anything else.
    """

    def resolve(self, name: str) -> ModuleType: ...


class ImportLoader:
    """Loader backed by the import system."""

    def resolve(self, name: str) -> ModuleType:
        """Import a module by its qualified name.

        Args:
            name: Dotted module name

        Returns:
            The imported module

        Raises:
            UnitDefinitionMissing: If the module body fails on one of its own
                imports (stale or partially built tree)
            UnitResolutionError: If the module itself is not importable, or
                its body raises anything other than ImportError
        """
        try:
            return importlib.import_module(name)
        except ModuleNotFoundError as e:
            if e.name is not None and _is_self_or_parent(e.name, name):
                raise UnitResolutionError(name, "module not found") from e
            raise UnitDefinitionMissing(name, e.name) from e
        except ImportError as e:
            raise UnitDefinitionMissing(name, e.name) from e
        except Exception as e:
            raise UnitResolutionError(name, f"{type(e).__name__}: {e}") from e


def _is_self_or_parent(missing: str, name: str) -> bool:
    return name == missing or name.startswith(missing + ".")
