"""Scan configuration."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Self

UNIT_SUFFIX = ".py"
ARCHIVE_SUFFIXES = (".zip", ".pyz", ".egg", ".whl")

ENV_BASE = "PKGSCAN_BASE"
ENV_UNIT_SUFFIX = "PKGSCAN_UNIT_SUFFIX"
ENV_ARCHIVE_SUFFIXES = "PKGSCAN_ARCHIVE_SUFFIXES"


@dataclass(frozen=True)
class ScanConfig:
    """Settings shared by location detection and enumeration."""

    unit_suffix: str = UNIT_SUFFIX
    archive_suffixes: tuple[str, ...] = ARCHIVE_SUFFIXES
    base: Path | None = None  # Explicit base location, skips detection

    def is_archive(self, path: Path) -> bool:
        """Check if path names an archive file by its suffix."""
        return path.name.endswith(self.archive_suffixes)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Create config from PKGSCAN_* environment variables.

        Args:
            environ: Mapping to read from. If None, uses os.environ.

        Returns:
            ScanConfig with defaults for unset variables
        """
        if environ is None:
            environ = os.environ

        base = environ.get(ENV_BASE)
        unit_suffix = environ.get(ENV_UNIT_SUFFIX) or UNIT_SUFFIX
        raw_suffixes = environ.get(ENV_ARCHIVE_SUFFIXES)
        if raw_suffixes:
            archive_suffixes = tuple(
                s.strip() for s in raw_suffixes.split(",") if s.strip()
            )
        else:
            archive_suffixes = ARCHIVE_SUFFIXES

        return cls(
            unit_suffix=unit_suffix,
            archive_suffixes=archive_suffixes,
            base=Path(base) if base else None,
        )
