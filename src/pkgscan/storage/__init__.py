"""Storage access for pkgscan: location detection, archive cache, discovery."""

from pkgscan.storage.archive import ArchiveCache
from pkgscan.storage.detect import detect_location
from pkgscan.storage.discover import discover_archive_units
from pkgscan.storage.discover import discover_tree_units

__all__ = [
    "ArchiveCache",
    "detect_location",
    "discover_archive_units",
    "discover_tree_units",
]
