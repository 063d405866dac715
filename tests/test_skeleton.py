"""
Tests for tree rendering
"""

import os
from pathlib import Path

import pytest

from lingest.ingest.patterns import FilterConfig
from lingest.ingest.skeleton import generate_tree, list_children


def render(root: Path, ignore=(), include=(), output_path: str = "") -> str:
    filters = FilterConfig.build(str(root), output_path, ignore_patterns=ignore, include_patterns=include)
    return generate_tree(str(root), filters)


class TestTreeLayout:
    """Tests for connectors, indentation and ordering."""

    def test_ignored_file_example(self, temp_dir: Path):
        """Test a/ with x.txt plus an ignored b.txt at the root."""
        (temp_dir / "a").mkdir()
        (temp_dir / "a" / "x.txt").write_text("x")
        (temp_dir / "b.txt").write_text("b")

        assert render(temp_dir, ignore=["b.txt"]) == "├── a/\n│   └── x.txt\n"

    def test_unfiltered_tree(self, temp_dir: Path):
        """Test full rendering with a trailing corner connector."""
        (temp_dir / "a").mkdir()
        (temp_dir / "a" / "x.txt").write_text("x")
        (temp_dir / "b.txt").write_text("b")

        assert render(temp_dir) == "├── a/\n│   └── x.txt\n└── b.txt\n"

    def test_directories_first_then_raw_name_order(self, temp_dir: Path):
        """Test dirs sort before files and names sort by raw value."""
        (temp_dir / "z").mkdir()
        (temp_dir / "A").mkdir()
        (temp_dir / "a.txt").write_text("")
        (temp_dir / "B.txt").write_text("")

        assert render(temp_dir) == "├── A/\n├── z/\n├── B.txt\n└── a.txt\n"

    def test_last_directory_indents_with_spaces(self, temp_dir: Path):
        """Test the continuation prefix below a last entry is blank."""
        (temp_dir / "a" / "b").mkdir(parents=True)
        (temp_dir / "a" / "b" / "c.txt").write_text("")

        assert render(temp_dir) == "└── a/\n    └── b/\n        └── c.txt\n"

    def test_empty_root_renders_nothing(self, temp_dir: Path):
        """Test an empty directory gives an empty string."""
        assert render(temp_dir) == ""

    def test_deterministic(self, sample_project: Path):
        """Test repeated renders are byte-identical."""
        first = render(sample_project, ignore=["**/*.log"])
        second = render(sample_project, ignore=["**/*.log"])
        assert first == second
        assert first


class TestTreeFiltering:
    """Tests for ignore/include handling in the tree."""

    def test_last_connector_uses_unfiltered_listing(self, temp_dir: Path):
        """Test a filtered-out last sibling leaves the branch connector above it."""
        (temp_dir / "a.txt").write_text("")
        (temp_dir / "b.log").write_text("")

        assert render(temp_dir, ignore=["*.log"]) == "├── a.txt\n"

    def test_ignored_directory_is_pruned(self, sample_project: Path):
        """Test an ignored directory hides its whole subtree."""
        tree = render(sample_project, ignore=["**/node_modules"])
        assert "node_modules" not in tree
        assert "index.js" not in tree
        assert "src/" in tree

    def test_recursive_ignore_at_any_depth(self, sample_project: Path):
        """Test **/*.log hides nested log files."""
        tree = render(sample_project, ignore=["**/*.log"])
        assert "debug.log" not in tree
        assert "main.py" in tree

    def test_include_gates_files_not_directories(self, temp_dir: Path):
        """Test include patterns leave directories visible."""
        (temp_dir / "docs").mkdir()
        (temp_dir / "docs" / "r.md").write_text("")
        (temp_dir / "src").mkdir()
        (temp_dir / "src" / "m.py").write_text("")

        assert render(temp_dir, include=["**/*.py"]) == "├── docs/\n└── src/\n    └── m.py\n"

    def test_output_path_is_excluded_before_counting(self, temp_dir: Path):
        """Test the output artifact is dropped from the listing entirely."""
        (temp_dir / "a.txt").write_text("")
        (temp_dir / "out.md").write_text("old output")

        assert render(temp_dir, output_path=str(temp_dir / "out.md")) == "└── a.txt\n"

    def test_nested_output_path_is_excluded(self, temp_dir: Path):
        """Test an output path inside a subdirectory is hidden too."""
        (temp_dir / "build").mkdir()
        (temp_dir / "build" / "out.md").write_text("")
        (temp_dir / "build" / "keep.txt").write_text("")

        tree = render(temp_dir, output_path="build/out.md")
        assert "out.md" not in tree
        assert tree == "└── build/\n    └── keep.txt\n"


class TestTreeResilience:
    """Tests for unreadable directories and special entries."""

    def test_unlistable_directory_renders_empty(self, temp_dir: Path, monkeypatch):
        """Test a listing failure degrades to an empty subtree."""
        locked = temp_dir / "locked"
        locked.mkdir()
        (locked / "secret.txt").write_text("")
        (temp_dir / "a.txt").write_text("")

        real_scandir = os.scandir

        def fake_scandir(path):
            if os.path.abspath(path) == str(locked):
                raise PermissionError(13, "Permission denied", str(path))
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", fake_scandir)

        assert render(temp_dir) == "├── locked/\n└── a.txt\n"

    def test_list_children_missing_directory(self, temp_dir: Path):
        """Test listing a missing directory returns nothing."""
        assert list_children(str(temp_dir / "missing"), FilterConfig()) == []

    def test_symlinks_are_not_rendered_or_followed(self, temp_dir: Path):
        """Test symlinks take a slot in the listing but are never shown."""
        target = temp_dir / "real"
        target.mkdir()
        (target / "inside.txt").write_text("")
        try:
            os.symlink(target, temp_dir / "zlink")
        except (OSError, NotImplementedError):
            pytest.skip("symlinks not supported")

        # zlink sorts last among non-directories, so real/ keeps the branch connector
        assert render(temp_dir) == "├── real/\n│   └── inside.txt\n"

    def test_undecodable_name_is_rendered_lossily(self, undecodable_project: Path):
        """Test a non-UTF-8 file name is shown with U+FFFD and can be encoded."""
        tree = render(undecodable_project)
        assert tree == "├── bad\ufffd.txt\n└── ok.txt\n"
        assert tree.encode("utf-8")

    def test_undecodable_name_can_be_ignored(self, undecodable_project: Path):
        """Test ignore patterns see the lossy name."""
        assert render(undecodable_project, ignore=["bad?.txt"]) == "└── ok.txt\n"
