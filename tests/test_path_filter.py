"""Unit tests for the path filter."""

import os

import pytest

from appletree.path_filter import PathFilter, is_visible, relative_path


def symlink_or_skip(target, link):
    try:
        os.symlink(target, link)
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks are not supported on this platform")


def test_relative_path(project):
    assert relative_path(project, project / "src" / "util" / "log.h") == "src/util/log.h"
    assert relative_path(project, project / "README.md") == "README.md"


def test_relative_path_of_missing_entry(project):
    assert relative_path(project, project / "missing.txt") is None


def test_everything_visible_without_patterns(project):
    path_filter = PathFilter(project)
    assert path_filter.rules is None
    assert path_filter.is_visible(project / ".git")
    assert path_filter.is_visible(project / "src" / "main.cpp")


def test_hidden_sentinel(project):
    path_filter = PathFilter(project, exclude_patterns={"."})
    assert not path_filter.is_visible(project / ".git")
    assert not path_filter.is_visible(project / ".env")
    assert path_filter.is_visible(project / "README.md")


def test_hidden_sentinel_combined_with_other_patterns(project):
    path_filter = PathFilter(project, exclude_patterns={".", "docs"})
    assert not path_filter.is_visible(project / ".env")
    assert not path_filter.is_visible(project / "docs")
    assert path_filter.is_visible(project / "src")


def test_hidden_sentinel_does_not_need_resolution(project):
    """Dot-entries are rejected by name, even if they could not be resolved."""
    path_filter = PathFilter(project, exclude_patterns={"."})
    assert not path_filter.is_visible(project / ".does-not-exist")


def test_bare_name_exclude_at_any_depth(project):
    path_filter = PathFilter(project, exclude_patterns={"node_modules"})
    assert not path_filter.is_visible(project / "node_modules")
    assert not path_filter.is_visible(project / "web" / "node_modules")
    assert not path_filter.is_visible(project / "src" / "util" / "node_modules")
    assert path_filter.is_visible(project / "web")


def test_path_exclude(project):
    path_filter = PathFilter(project, exclude_patterns={"src/main.cpp"})
    assert not path_filter.is_visible(project / "src" / "main.cpp")
    assert path_filter.is_visible(project / "src" / "other.h")


def test_only_ancestors_visible_siblings_hidden(project):
    path_filter = PathFilter(project, only_patterns={"src/util/log.h"})
    assert path_filter.is_visible(project / "src")
    assert path_filter.is_visible(project / "src" / "util")
    assert path_filter.is_visible(project / "src" / "util" / "log.h")
    assert not path_filter.is_visible(project / "src" / "other.h")
    assert not path_filter.is_visible(project / "docs")


def test_exclude_wins_over_only(project):
    path_filter = PathFilter(project, exclude_patterns={"util"}, only_patterns={"src/util"})
    assert path_filter.is_visible(project / "src")
    assert not path_filter.is_visible(project / "src" / "util")


def test_missing_entry_is_hidden(project):
    assert not PathFilter(project).is_visible(project / "missing.txt")


def test_broken_symlink_is_hidden(project):
    symlink_or_skip(project / "nowhere", project / "dangling")
    assert not PathFilter(project).is_visible(project / "dangling")


def test_symlink_is_matched_by_its_target_path(project):
    symlink_or_skip(project / "src", project / "alias")
    path_filter = PathFilter(project, exclude_patterns={"src/util"})
    assert path_filter.is_visible(project / "alias")
    assert not path_filter.is_visible(project / "alias" / "util")


def test_symlink_bare_name_uses_link_name(project):
    symlink_or_skip(project / "src", project / "alias")
    assert not PathFilter(project, exclude_patterns={"alias"}).is_visible(project / "alias")
    assert PathFilter(project, exclude_patterns={"src"}).is_visible(project / "alias")


def test_is_visible_is_deterministic(project):
    entry = project / "src" / "util"
    results = {is_visible(project, entry, {"docs"}, {"src/util/log.h"}) for _ in range(5)}
    assert results == {True}


def test_from_config(make_config):
    config = make_config(exclude=["."], only=["src"])
    path_filter = PathFilter.from_config(config)
    assert path_filter.root == config.root
    assert path_filter.hidden_rules is not None
    assert not path_filter.is_visible(config.root / "docs")
    assert path_filter.is_visible(config.root / "src" / "main.cpp")
