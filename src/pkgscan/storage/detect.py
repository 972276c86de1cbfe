"""Detection of the running program's storage location."""

import importlib
import logging
import sys
import zipimport
from pathlib import Path
from types import ModuleType

from pkgscan.config import ScanConfig
from pkgscan.exceptions import LocationDetectionError
from pkgscan.models import StorageLocation

logger = logging.getLogger("pkgscan.storage")

DEFAULT_ANCHOR = "__main__"


def detect_location(
    anchor: str = DEFAULT_ANCHOR, config: ScanConfig | None = None
) -> StorageLocation:
    """Determine where the program's modules are stored.

    Asks the anchor module's loader for its archive first, then falls back to
    the sys.path root the module was loaded from. An explicit config.base
    skips detection entirely.

    Args:
        anchor: Name of a module loaded from the program's base location
        config: Scan configuration. If None, read from the environment
            (ScanConfig.from_env), so PKGSCAN_BASE overrides detection.

    Returns:
        StorageLocation for the detected base

    Raises:
        LocationDetectionError: If the anchor cannot be imported or has no
            location on disk
    """
    if config is None:
        config = ScanConfig.from_env()

    if config.base is not None:
        location = StorageLocation.for_path(config.base, config)
    else:
        try:
            module = sys.modules.get(anchor) or importlib.import_module(anchor)
            base = loader_root(module) or packaged_root(module)
        except (ImportError, IndexError) as e:
            raise LocationDetectionError(
                f"Cannot determine location of '{anchor}': {e}"
            ) from e
        if base is None:
            raise LocationDetectionError(f"Module '{anchor}' has no location on disk")
        location = StorageLocation.for_path(base, config)

    logger.debug("Detected %s at %s", location.mode.name, location.base)
    return location


def loader_root(module: ModuleType) -> Path | None:
    """Get the archive a module was imported from, if its loader knows it."""
    loader = getattr(module, "__loader__", None)
    if isinstance(loader, zipimport.zipimporter):
        return Path(loader.archive)
    return None


def packaged_root(module: ModuleType) -> Path | None:
    """Get the sys.path root a module was loaded from.

    "a.b" at base/a/b.py and package "a.b" at base/a/b/__init__.py both
    give base.

    Raises:
        IndexError: If the file is not nested deeply enough for its name
    """
    filename = getattr(module, "__file__", None)
    if filename is None:
        return None

    spec = getattr(module, "__spec__", None)
    name = spec.name if spec is not None else module.__name__

    path = Path(filename).resolve()
    levels = name.count(".")
    if path.stem == "__init__":
        levels += 1
    return path.parents[levels]
