"""Tests for the Entry data model."""

import pytest

from aidump.types import Entry, RenderMode


@pytest.mark.parametrize(
    "name,expected",
    [
        ("main.py", "py"),
        ("archive.tar.gz", "gz"),
        ("Makefile", ""),
        (".gitignore", "gitignore"),
        ("trailing.", ""),
        ("x.BIN", "BIN"),
    ],
)
def test_extension(name, expected):
    assert Entry(name, name, False).extension == expected


def test_anchored_path():
    assert Entry("build", "src/build", True).anchored_path == "/src/build"


def test_child_of_root_has_no_leading_slash():
    root = Entry("project", "", True)
    child = root.child("src", True)
    assert child.relative_path == "src"
    assert child.is_directory
    assert child.child("main.py", False) == Entry("main.py", "src/main.py", False)


def test_entries_are_immutable():
    entry = Entry("a.txt", "a.txt", False)
    with pytest.raises(AttributeError):
        entry.name = "b.txt"


def test_render_mode_from_string():
    assert RenderMode("tree") is RenderMode.TREE
    assert RenderMode.DUMP == "dump"
