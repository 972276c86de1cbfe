"""Data models for pkgscan."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from enum import auto
from pathlib import Path
from types import ModuleType
from typing import Self

from pkgscan.config import ScanConfig

Action = Callable[[ModuleType], object]
Predicate = Callable[[ModuleType], bool]


class StorageMode(Enum):
    """How the program's modules are stored."""

    ARCHIVE = auto()
    DIRECTORY_TREE = auto()


@dataclass(frozen=True)
class StorageLocation:
    """Where the program's modules live and in which shape."""

    base: Path  # Archive file or root directory (absolute)
    mode: StorageMode

    @classmethod
    def for_path(cls, base: Path, config: ScanConfig | None = None) -> Self:
        """Classify a base location by its file name.

        Args:
            base: Archive file or directory holding top-level modules
            config: Supplies the archive suffixes. If None, uses defaults.

        Returns:
            StorageLocation with absolute base
        """
        if config is None:
            config = ScanConfig()
        base = Path(base).absolute()
        if config.is_archive(base):
            mode = StorageMode.ARCHIVE
        else:
            mode = StorageMode.DIRECTORY_TREE
        return cls(base=base, mode=mode)

    @property
    def is_archive(self) -> bool:
        return self.mode is StorageMode.ARCHIVE


@dataclass(frozen=True)
class ScanRequest:
    """A single namespace scan."""

    namespace: str
    include_subpackages: bool = True
