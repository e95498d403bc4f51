"""Test configuration and fixtures for appletree."""

import pytest

from appletree.config import TreeConfig


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def project(tmp_path):
    """Create a small project tree and return its canonical root.

    project/
    ├── .env
    ├── .git/
    │   └── config
    ├── README.md          (1536 bytes)
    ├── docs/
    │   └── guide.md
    ├── node_modules/
    │   └── pkg/
    │       └── index.js
    ├── src/
    │   ├── main.cpp       (100 bytes)
    │   ├── other.h
    │   └── util/
    │       ├── log.h      (10 bytes)
    │       └── node_modules/
    │           └── dep.js
    └── web/
        └── node_modules/
            └── x.js
    """
    root = tmp_path / "project"
    (root / ".git").mkdir(parents=True)
    (root / ".git" / "config").write_text("[core]\n")
    (root / ".env").write_text("KEY=value\n")
    (root / "README.md").write_bytes(b"r" * 1536)
    (root / "docs").mkdir()
    (root / "docs" / "guide.md").write_text("# Guide\n")
    (root / "node_modules" / "pkg").mkdir(parents=True)
    (root / "node_modules" / "pkg" / "index.js").write_text("module.exports = {}\n")
    (root / "src" / "util" / "node_modules").mkdir(parents=True)
    (root / "src" / "main.cpp").write_bytes(b"m" * 100)
    (root / "src" / "other.h").write_text("#pragma once\n")
    (root / "src" / "util" / "log.h").write_bytes(b"l" * 10)
    (root / "src" / "util" / "node_modules" / "dep.js").write_text("\n")
    (root / "web" / "node_modules").mkdir(parents=True)
    (root / "web" / "node_modules" / "x.js").write_text("\n")
    return root.resolve()


@pytest.fixture
def make_config(project):
    """Build a TreeConfig for the project fixture with keyword overrides."""

    def factory(**kwargs):
        return TreeConfig.create(project, **kwargs)

    return factory
