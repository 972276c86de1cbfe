"""Tests for unit discovery in archives and directory trees."""

import pytest

from conftest import make_tree
from pkgscan.exceptions import StorageIOError
from pkgscan.storage import discover_archive_units
from pkgscan.storage import discover_tree_units

ENTRIES = [
    "pkg/",
    "pkg/A.py",
    "pkg/data.txt",
    "pkg/sub/",
    "pkg/sub/B.py",
    "other/C.py",
    "main.py",
]


class TestDiscoverArchiveUnits:
    """Tests for discover_archive_units()."""

    def test_namespace_without_subtree(self):
        """Test that only the namespace's own units are found."""
        units = list(discover_archive_units(ENTRIES, "pkg/", False, ".py"))

        assert units == ["pkg/A.py"]

    def test_namespace_with_subtree(self):
        """Test that nested units are found in archive order."""
        units = list(discover_archive_units(ENTRIES, "pkg/", True, ".py"))

        assert units == ["pkg/A.py", "pkg/sub/B.py"]

    def test_root_with_subtree_finds_everything(self):
        """Test that an empty prefix with subtree finds every unit."""
        units = list(discover_archive_units(ENTRIES, "", True, ".py"))

        assert units == ["pkg/A.py", "pkg/sub/B.py", "other/C.py", "main.py"]

    def test_root_without_subtree_finds_top_level(self):
        """Test that an empty prefix without subtree finds top-level units."""
        units = list(discover_archive_units(ENTRIES, "", False, ".py"))

        assert units == ["main.py"]

    def test_ignores_non_unit_entries(self):
        """Test that directory markers and data files are skipped."""
        units = list(discover_archive_units(ENTRIES, "pkg/", True, ".py"))

        assert "pkg/data.txt" not in units
        assert "pkg/" not in units


class TestDiscoverTreeUnits:
    """Tests for discover_tree_units()."""

    @pytest.fixture
    def tree(self, tmp_path):
        return make_tree(
            tmp_path / "root",
            [
                "pkg/A.py",
                "pkg/Z.py",
                "pkg/notes.txt",
                "pkg/sub/B.py",
                "pkg/sub/deep/D.py",
                "other/C.py",
                "main.py",
            ],
        )

    def test_namespace_without_subtree(self, tree):
        """Test that subdirectories are not entered when disabled."""
        units = list(discover_tree_units(tree, "pkg/", False, ".py"))

        assert units == ["pkg/A.py", "pkg/Z.py"]

    def test_namespace_with_subtree_includes_every_level(self, tree):
        """Test that all nested levels are included once a subtree is entered."""
        units = list(discover_tree_units(tree, "pkg/", True, ".py"))

        assert units == [
            "pkg/A.py",
            "pkg/Z.py",
            "pkg/sub/B.py",
            "pkg/sub/deep/D.py",
        ]

    def test_root_with_subtree(self, tree):
        """Test that an empty prefix walks the whole tree."""
        units = list(discover_tree_units(tree, "", True, ".py"))

        assert sorted(units) == [
            "main.py",
            "other/C.py",
            "pkg/A.py",
            "pkg/Z.py",
            "pkg/sub/B.py",
            "pkg/sub/deep/D.py",
        ]

    def test_root_without_subtree(self, tree):
        """Test that an empty prefix without subtree lists the base only."""
        units = list(discover_tree_units(tree, "", False, ".py"))

        assert units == ["main.py"]

    def test_output_is_sorted_per_directory(self, tmp_path):
        """Test that files come out sorted regardless of creation order."""
        root = make_tree(tmp_path / "root", ["pkg/zeta.py", "pkg/alpha.py"])

        units = list(discover_tree_units(root, "pkg/", False, ".py"))

        assert units == ["pkg/alpha.py", "pkg/zeta.py"]

    def test_paths_are_relative_and_slash_separated(self, tree):
        """Test that paths are relative to base and use '/'."""
        units = list(discover_tree_units(tree, "pkg/", True, ".py"))

        assert all(not u.startswith("/") for u in units)
        assert "pkg/sub/deep/D.py" in units

    def test_does_not_follow_directory_symlinks(self, tmp_path):
        """Test that a symlinked directory is not traversed."""
        root = make_tree(tmp_path / "root", ["pkg/A.py"])
        external = make_tree(tmp_path / "external", ["E.py"])
        (root / "pkg" / "linked").symlink_to(external)

        units = list(discover_tree_units(root, "pkg/", True, ".py"))

        assert units == ["pkg/A.py"]

    def test_missing_directory_raises_storage_error(self, tmp_path):
        """Test that a directory that cannot be listed raises StorageIOError."""
        with pytest.raises(StorageIOError):
            list(discover_tree_units(tmp_path / "missing", "", True, ".py"))
