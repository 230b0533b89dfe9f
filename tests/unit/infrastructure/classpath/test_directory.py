"""Tests for infrastructure/classpath/directory.py."""

import os
from pathlib import Path

import pytest

from singleton_detector.domain.exceptions import ResourceAccessError
from singleton_detector.infrastructure.classpath.directory import DirectoryClasspathRoot
from tests.factories import class_entries, write_tree

needs_symlinks = pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")


class TestDirectoryClasspathRoot:
    """Tests for DirectoryClasspathRoot."""

    def test_origin(self, tmp_path: Path) -> None:
        assert DirectoryClasspathRoot(tmp_path).origin == tmp_path

    def test_none_origin_raises(self) -> None:
        with pytest.raises(TypeError, match="origin"):
            DirectoryClasspathRoot(None)  # type: ignore[arg-type]

    def test_lists_root(self, tmp_path: Path) -> None:
        write_tree(tmp_path, class_entries("Main", "com.example.Foo"))

        result = DirectoryClasspathRoot(tmp_path).list_resources("")

        assert result == ("Main.class", "com")

    def test_lists_package_sorted(self, tmp_path: Path) -> None:
        write_tree(
            tmp_path,
            class_entries("com.example.Zed", "com.example.Alpha", "com.example.util.X"),
        )

        result = DirectoryClasspathRoot(tmp_path).list_resources("com/example/")

        assert result == ("Alpha.class", "Zed.class", "util")

    def test_returns_bare_names(self, tmp_path: Path) -> None:
        write_tree(tmp_path, class_entries("com.example.Foo"))

        result = DirectoryClasspathRoot(tmp_path).list_resources("com/")

        assert result == ("example",)
        assert not any("/" in name for name in result)

    def test_empty_directory(self, tmp_path: Path) -> None:
        (tmp_path / "empty").mkdir()

        assert DirectoryClasspathRoot(tmp_path).list_resources("empty/") == ()

    def test_leaf_file_has_no_children(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"META-INF/MANIFEST.MF": b"Manifest-Version: 1.0\n"})

        result = DirectoryClasspathRoot(tmp_path).list_resources("META-INF/MANIFEST.MF/")

        assert result == ()

    def test_missing_prefix_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ResourceAccessError, match="no such directory"):
            DirectoryClasspathRoot(tmp_path).list_resources("org/missing/")

    def test_missing_origin_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ResourceAccessError):
            DirectoryClasspathRoot(tmp_path / "nope").list_resources("")

    def test_file_origin_raises(self, tmp_path: Path) -> None:
        origin = tmp_path / "classes.war"
        origin.write_bytes(b"not a directory")

        with pytest.raises(ResourceAccessError, match="not a directory"):
            DirectoryClasspathRoot(origin).list_resources("")

    def test_deterministic(self, tmp_path: Path) -> None:
        write_tree(tmp_path, class_entries("a.B", "a.C", "a.d.E"))
        root = DirectoryClasspathRoot(tmp_path)

        assert root.list_resources("a/") == root.list_resources("a/")


class TestReadResource:
    """Tests for DirectoryClasspathRoot.read_resource()."""

    def test_reads_bytes(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"com/Foo.class": b"\xca\xfe\xba\xbe"})

        data = DirectoryClasspathRoot(tmp_path).read_resource("com/Foo.class")

        assert data == b"\xca\xfe\xba\xbe"

    def test_missing_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ResourceAccessError, match="file not found"):
            DirectoryClasspathRoot(tmp_path).read_resource("com/Missing.class")


@needs_symlinks
class TestLinkCycles:
    """Links back onto the traversal path are not listed."""

    def test_link_to_ancestor_skipped(self, tmp_path: Path) -> None:
        write_tree(tmp_path, class_entries("a.Foo"))
        (tmp_path / "a" / "loop").symlink_to(tmp_path / "a", target_is_directory=True)
        (tmp_path / "a" / "up").symlink_to(tmp_path, target_is_directory=True)

        result = DirectoryClasspathRoot(tmp_path).list_resources("a/")

        assert result == ("Foo.class",)

    def test_link_to_sibling_listed(self, tmp_path: Path) -> None:
        write_tree(tmp_path, class_entries("a.Foo", "b.Bar"))
        (tmp_path / "a" / "shared").symlink_to(tmp_path / "b", target_is_directory=True)

        root = DirectoryClasspathRoot(tmp_path)

        assert "shared" in root.list_resources("a/")
        assert root.list_resources("a/shared/") == ("Bar.class",)

    def test_mutual_links_terminate(self, tmp_path: Path) -> None:
        """a/to_b -> b and b/to_a -> a: the second hop is recognized as a cycle."""
        (tmp_path / "a").mkdir()
        (tmp_path / "b").mkdir()
        (tmp_path / "a" / "to_b").symlink_to(tmp_path / "b", target_is_directory=True)
        (tmp_path / "b" / "to_a").symlink_to(tmp_path / "a", target_is_directory=True)

        result = DirectoryClasspathRoot(tmp_path).list_resources("a/to_b/")

        assert result == ()
