"""Test configuration and fixtures for aidump."""

from pathlib import Path
from typing import Dict, List, Union

import pytest

from aidump.types import Entry

TreeSpec = Dict[str, Union[str, bytes, "TreeSpec"]]


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


def create_tree(base: Path, spec: TreeSpec) -> Path:
    """Create files and directories below base from a nested dict.

    Dict values are subdirectories; str or bytes values are file contents.
    """
    base.mkdir(parents=True, exist_ok=True)
    for name, value in spec.items():
        path = base / name
        if isinstance(value, dict):
            create_tree(path, value)
        elif isinstance(value, bytes):
            path.write_bytes(value)
        else:
            path.write_text(value)
    return base


class FakeLister:
    """In-memory directory listing built from relative paths.

    Directories are written with a trailing slash: ``["a/", "a/readme.md"]``.
    Records every listed directory so tests can check what was traversed.
    """

    def __init__(self, paths: List[str], root_name: str = "root") -> None:
        self.root_name = root_name
        self.directories = {p.rstrip("/") for p in paths if p.endswith("/")}
        self.paths = sorted(p.rstrip("/") for p in paths)
        self.listed: List[str] = []

    def root_entry(self) -> Entry:
        return Entry(self.root_name, "", True)

    def list_children(self, entry: Entry) -> List[Entry]:
        self.listed.append(entry.relative_path)
        children = []
        for path in self.paths:
            parent, _, name = path.rpartition("/")
            if parent == entry.relative_path:
                children.append(Entry(name, path, path in self.directories))
        return sorted(children, key=lambda e: e.name)


@pytest.fixture
def make_tree(tmp_path):
    """Factory creating a directory structure below a named root in tmp_path."""

    def _make_tree(spec: TreeSpec, root_name: str = "root") -> Path:
        return create_tree(tmp_path / root_name, spec)

    return _make_tree


@pytest.fixture
def fake_lister():
    """Factory for FakeLister instances."""
    return FakeLister
