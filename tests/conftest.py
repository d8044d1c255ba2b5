"""
Shared fixtures: a workspace tree laid out as <root>/src/<distro>/<author>/<project>.
"""

import os
from pathlib import Path

import pytest

from gowork.services import HierarchyService, LocatorService


PROJECTS = [
    ("aaa", "user", "project"),
    ("bbb", "user", "project"),
    ("ccc", "user", "project"),
    ("github.com", "alice", "gowork"),
    ("github.com", "alice", "termui-widgets"),
    ("github.com", "stretchr", "testify"),
    ("code.google.com", "p", "cascadia"),
]


def make_tree(root, projects=PROJECTS, hidden=(".hidden",), files=("test.go",)):
    """
    Create project directories below ``root/src``.

    Returns the list of created project directories.
    """
    src = Path(root) / "src"
    created = []
    for parts in projects:
        path = src.joinpath(*parts)
        path.mkdir(parents=True, exist_ok=True)
        created.append(path)
    for name in hidden:
        (src / name).mkdir(parents=True, exist_ok=True)
    for name in files:
        src.mkdir(parents=True, exist_ok=True)
        (src / name).write_text("package main\n")
    return created


@pytest.fixture
def workspace(tmp_path):
    """A populated workspace root."""
    make_tree(tmp_path)
    return tmp_path


@pytest.fixture
def hierarchy(workspace):
    return HierarchyService(str(workspace))


@pytest.fixture
def locator(hierarchy):
    return LocatorService(hierarchy)


@pytest.fixture
def missing_root(tmp_path):
    """A root path that does not exist."""
    return str(tmp_path / "does-not-exist")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path_factory):
    """Keep the user's config and GOPATH out of every test."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    for key in list(os.environ):
        if key.startswith("GOWORK_") or key == "GOPATH":
            monkeypatch.delenv(key, raising=False)
    return home
