"""Unit tests for the depth-first tree walker."""

import os
from unittest.mock import patch

import pytest

from appletree.config import TreeConfig
from appletree.path_filter import PathFilter
from appletree.tree_walker import TreeEntry, iter_tree, list_level, walk


def names(config):
    return [entry.path.relative_to(config.root).as_posix() for entry in iter_tree(config, config.root, "", 0)]


def test_walk_order_is_depth_first_and_sorted(make_config):
    config = make_config(exclude=[".", "node_modules"])
    assert names(config) == [
        "README.md",
        "docs",
        "docs/guide.md",
        "src",
        "src/main.cpp",
        "src/other.h",
        "src/util",
        "src/util/log.h",
        "web",
    ]


def test_directories_and_files_are_sorted_together(make_config):
    config = make_config(max_depth=1)
    assert names(config) == [".env", ".git", "README.md", "docs", "node_modules", "src", "web"]


def test_siblings_strictly_increasing(make_config):
    config = make_config()
    by_parent = {}
    for entry in iter_tree(config, config.root, "", 0):
        by_parent.setdefault(entry.path.parent, []).append(str(entry.path))
    for siblings in by_parent.values():
        assert siblings == sorted(siblings)
        assert len(set(siblings)) == len(siblings)


def test_depth_zero_yields_nothing(make_config):
    assert names(make_config(max_depth=0)) == []


@pytest.mark.parametrize("max_depth", [1, 2, 3])
def test_depth_limit(make_config, max_depth):
    config = make_config(max_depth=max_depth)
    depths = {entry.depth for entry in iter_tree(config, config.root, "", 0)}
    assert max(depths) == max_depth


def test_depth_is_counted_from_the_root(make_config):
    config = make_config(exclude=[".", "node_modules"])
    entries = {e.path.relative_to(config.root).as_posix(): e for e in iter_tree(config, config.root, "", 0)}
    assert entries["src"].depth == 1
    assert entries["src/util"].depth == 2
    assert entries["src/util/log.h"].depth == 3


def test_last_sibling_detection(make_config):
    config = make_config(exclude=[".", "node_modules"])
    entries = {e.path.relative_to(config.root).as_posix(): e for e in iter_tree(config, config.root, "", 0)}
    assert not entries["src/main.cpp"].is_last
    assert not entries["src/other.h"].is_last
    assert entries["src/util"].is_last
    assert entries["web"].is_last
    assert not entries["src"].is_last


def test_prefixes(make_config):
    config = make_config(exclude=[".", "node_modules"])
    entries = {e.path.relative_to(config.root).as_posix(): e for e in iter_tree(config, config.root, "", 0)}
    assert entries["src"].prefix == ""
    # src is not last, so its children continue the vertical bar
    assert entries["src/main.cpp"].prefix == "│   "
    # util is the last child of src
    assert entries["src/util/log.h"].prefix == "│       "


def test_excluded_directory_is_not_descended(make_config):
    config = make_config(exclude=["node_modules"])
    listed = []
    original = os.scandir

    def tracking_scandir(path):
        listed.append(os.fspath(path))
        return original(path)

    with patch("appletree.tree_walker.os.scandir", side_effect=tracking_scandir):
        result = names(config)

    assert not any("node_modules" in p for p in result)
    assert not any("node_modules" in p for p in listed)


def test_only_pattern_walk(make_config):
    config = make_config(only=["src/util/log.h"])
    assert names(config) == ["src", "src/util", "src/util/log.h"]


def test_dot_slash_patterns_match_relative_paths(make_config):
    assert names(make_config(only=["./src/util/log.h"])) == ["src", "src/util", "src/util/log.h"]

    result = names(make_config(exclude=[".", "node_modules", "./src"]))
    assert result == ["README.md", "docs", "docs/guide.md", "web"]


def test_only_name_behind_hidden_or_excluded_entries(make_config, project):
    (project / "src" / ".cache").mkdir()
    (project / "src" / ".cache" / "config").write_text("x\n")

    assert names(make_config(exclude=["."], only=["config"])) == []
    assert names(make_config(exclude=["node_modules"], only=["dep.js"])) == []
    assert names(make_config(only=["dep.js"])) == [
        "src",
        "src/util",
        "src/util/node_modules",
        "src/util/node_modules/dep.js",
    ]


def test_depth_limit_takes_precedence_over_only(make_config):
    config = make_config(only=["src/util/log.h"], max_depth=2)
    assert names(config) == ["src", "src/util"]


def test_unreadable_directory_is_skipped(make_config):
    config = make_config(exclude=["."])
    original = os.scandir

    def failing_scandir(path):
        if os.fspath(path).endswith("docs"):
            raise PermissionError("denied")
        return original(path)

    with patch("appletree.tree_walker.os.scandir", side_effect=failing_scandir):
        result = names(config)

    assert "docs" in result
    assert "docs/guide.md" not in result
    assert "src/main.cpp" in result


def test_file_root_has_no_children(project):
    config = TreeConfig.create(project / "README.md")
    assert list(iter_tree(config, config.root, "", 0)) == []


def test_symlinked_directory_followed_by_default(make_config, project):
    try:
        os.symlink(project / "docs", project / "manual")
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks are not supported on this platform")

    assert "manual/guide.md" in names(make_config())
    result = names(make_config(follow_symlinks=False))
    assert "manual" in result
    assert "manual/guide.md" not in result


def test_list_level(make_config):
    config = make_config(exclude=["."])
    entries = list_level(config, config.root / "src", "│   ", 1, PathFilter.from_config(config))
    assert [e.name for e in entries] == ["main.cpp", "other.h", "util"]
    assert [e.is_last for e in entries] == [False, False, True]
    assert all(e.depth == 2 and e.prefix == "│   " for e in entries)
    assert entries[2].is_dir


def test_walk_invokes_callback_in_order(make_config):
    config = make_config(exclude=[".", "node_modules"], max_depth=1)
    visited = []
    walk(config, config.root, "", 0, visited.append)
    assert all(isinstance(entry, TreeEntry) for entry in visited)
    assert [entry.name for entry in visited] == ["README.md", "docs", "src", "web"]


def test_deep_tree_does_not_hit_recursion_limit(tmp_path):
    current = tmp_path
    for _ in range(200):
        current = current / "d"
        current.mkdir()
    config = TreeConfig.create(tmp_path)
    entries = list(iter_tree(config, config.root, "", 0))
    assert len(entries) == 200
    assert entries[-1].depth == 200
    assert entries[-1].prefix == "    " * 199
