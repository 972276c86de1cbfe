"""Find the modules of a package, in a directory tree or a zip archive."""

from pkgscan.actions import CALL_INITIALIZER
from pkgscan.actions import call_initializer
from pkgscan.config import ScanConfig
from pkgscan.finder import Finder
from pkgscan.loader import ImportLoader
from pkgscan.loader import Loader
from pkgscan.models import StorageLocation
from pkgscan.models import StorageMode
from pkgscan.storage import detect_location

__version__ = "0.1.0"

__all__ = [
    "CALL_INITIALIZER",
    "Finder",
    "ImportLoader",
    "Loader",
    "ScanConfig",
    "StorageLocation",
    "StorageMode",
    "__version__",
    "call_initializer",
    "detect_location",
]
