"""Shared fixtures for pkgscan tests."""

import importlib
import sys
import zipfile
from pathlib import Path
from types import ModuleType

import pytest

from pkgscan.config import ENV_ARCHIVE_SUFFIXES
from pkgscan.config import ENV_BASE
from pkgscan.config import ENV_UNIT_SUFFIX
from pkgscan.exceptions import UnitDefinitionMissing


def make_tree(root: Path, files: list[str]) -> Path:
    """Create empty files (and their directories) under root."""
    root.mkdir(parents=True, exist_ok=True)
    for rel in files:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
    return root


def make_archive(path: Path, entries: list[str]) -> Path:
    """Create a zip archive with the given entries, in order.

    Entries ending in "/" become directory entries.
    """
    with zipfile.ZipFile(path, "w") as archive:
        for entry in entries:
            archive.writestr(entry, "" if entry.endswith("/") else "# module\n")
    return path


class FakeLoader:
    """Loader that returns bare modules and records what it resolved."""

    def __init__(self, missing: set[str] | None = None):
        self.missing = missing or set()
        self.resolved: list[str] = []

    def resolve(self, name: str) -> ModuleType:
        self.resolved.append(name)
        if name in self.missing:
            raise UnitDefinitionMissing(name, "stale_dependency")
        return ModuleType(name)


@pytest.fixture
def fake_loader():
    """Loader that never imports anything."""
    return FakeLoader()


@pytest.fixture
def isolated_imports(monkeypatch, tmp_path):
    """Restore sys.path and forget modules imported from tmp_path."""
    monkeypatch.setattr(sys, "path", list(sys.path))
    importlib.invalidate_caches()
    yield
    doomed = []
    for name, module in list(sys.modules.items()):
        location = getattr(module, "__file__", None) or str(
            list(getattr(module, "__path__", []))
        )
        if str(tmp_path) in location:
            doomed.append(name)
    for name in doomed:
        del sys.modules[name]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep PKGSCAN_* settings of the calling shell out of tests."""
    for variable in (ENV_BASE, ENV_UNIT_SUFFIX, ENV_ARCHIVE_SUFFIXES):
        monkeypatch.delenv(variable, raising=False)
