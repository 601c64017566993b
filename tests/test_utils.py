"""Tests for rootfinder.utils module."""

import os
from pathlib import Path

from rootfinder.utils import (
    find_dir_upward,
    find_file_upward,
    has_trailing_sep,
    is_path_prefix,
    iter_ancestors,
    resolve_path,
    strip_trailing_sep,
)


class TestTrailingSeparator:
    def test_has_trailing_sep(self):
        assert has_trailing_sep(".git/")
        assert has_trailing_sep("a" + os.sep)
        assert not has_trailing_sep(".git")

    def test_strip_trailing_sep(self):
        assert strip_trailing_sep(".git/") == ".git"
        assert strip_trailing_sep(".git//") == ".git"
        assert strip_trailing_sep("package.json") == "package.json"


class TestResolvePath:
    """Tests for resolve_path."""

    def test_absolute_without_separator(self, tmp_path):
        resolved = resolve_path(str(tmp_path) + os.sep)
        assert resolved == str(tmp_path.resolve())
        assert not resolved.endswith(os.sep)

    def test_trailing_separator_requested(self, tmp_path):
        resolved = resolve_path(tmp_path, trailing_sep=True)
        assert resolved == str(tmp_path.resolve()) + os.sep

    def test_relative_made_absolute(self, tmp_path, monkeypatch):
        (tmp_path / "sub").mkdir()
        monkeypatch.chdir(tmp_path)
        assert resolve_path("sub") == str(tmp_path.resolve() / "sub")

    def test_nonexistent_path(self, tmp_path):
        """Paths that do not exist still resolve."""
        missing = tmp_path / "nope" / "file.txt"
        assert resolve_path(missing) == str(tmp_path.resolve() / "nope" / "file.txt")

    def test_filesystem_root_keeps_separator(self):
        root = Path(Path.cwd().anchor)
        assert resolve_path(root) == str(root.resolve())
        assert resolve_path(root, trailing_sep=True) == str(root.resolve())


class TestIsPathPrefix:
    """Tests for is_path_prefix."""

    def test_ancestor_is_prefix(self, tmp_path):
        assert is_path_prefix(tmp_path, tmp_path / "a" / "b")

    def test_equal_is_prefix(self, tmp_path):
        assert is_path_prefix(tmp_path / "a", tmp_path / "a")

    def test_sibling_with_common_stem_is_not_prefix(self, tmp_path):
        """/foo/bar must not be a prefix of /foo/barbaz."""
        assert not is_path_prefix(tmp_path / "bar", tmp_path / "barbaz")

    def test_child_is_not_prefix(self, tmp_path):
        assert not is_path_prefix(tmp_path / "a" / "b", tmp_path / "a")


def test_iter_ancestors_ends_at_root(tmp_path):
    ancestors = list(iter_ancestors(tmp_path))
    assert ancestors[0] == tmp_path
    assert ancestors[-1] == Path(tmp_path.anchor)


class TestFindDirUpward:
    """Tests for find_dir_upward."""

    def test_found_in_start(self, tmp_path):
        (tmp_path / "node_modules").mkdir()
        assert find_dir_upward("node_modules", tmp_path) == tmp_path / "node_modules"

    def test_found_in_ancestor(self, tmp_path):
        (tmp_path / ".git").mkdir()
        deep = tmp_path / "src" / "deep"
        deep.mkdir(parents=True)
        assert find_dir_upward(".git", deep) == tmp_path / ".git"

    def test_nearest_wins(self, tmp_path):
        inner = tmp_path / "inner"
        (tmp_path / "marker").mkdir()
        (inner / "marker").mkdir(parents=True)
        assert find_dir_upward("marker", inner) == inner / "marker"

    def test_files_ignored(self, tmp_path):
        (tmp_path / "marker").write_text("")
        assert find_dir_upward("marker", tmp_path) is None

    def test_not_found(self, tmp_path):
        assert find_dir_upward("no-such-marker-dir-0f3a", tmp_path) is None


class TestFindFileUpward:
    """Tests for find_file_upward."""

    def test_found_in_ancestor(self, tmp_path):
        (tmp_path / "package.json").write_text("{}")
        src = tmp_path / "src"
        src.mkdir()
        assert find_file_upward("package.json", src) == tmp_path / "package.json"

    def test_directories_ignored(self, tmp_path):
        (tmp_path / "package.json").mkdir()
        assert find_file_upward("package.json", tmp_path) is None

    def test_suffixes_tried_after_exact_name(self, tmp_path):
        (tmp_path / "Makefile.in").write_text("")
        assert find_file_upward("Makefile", tmp_path) is None
        assert find_file_upward("Makefile", tmp_path, suffixes=(".in",)) == (
            tmp_path / "Makefile.in"
        )

    def test_exact_name_preferred_over_suffix(self, tmp_path):
        (tmp_path / "setup").write_text("")
        (tmp_path / "setup.py").write_text("")
        assert find_file_upward("setup", tmp_path, suffixes=(".py",)) == tmp_path / "setup"

    def test_not_found(self, tmp_path):
        assert find_file_upward("no-such-marker-file-0f3a", tmp_path) is None
