"""Unit tests for composite rules."""

from unittest.mock import Mock

import pytest

from aidump.selection.base_rules import BaseRules
from aidump.selection.composite_rules import CompositeRules
from aidump.types import Entry


class MockRules(BaseRules):
    """Mock rules for testing."""

    def __init__(self, paths=None):
        self.paths = paths or []

    def matches(self, entry: Entry) -> bool:
        return entry.relative_path in self.paths


def entry(path):
    return Entry(path, path, False)


def test_init_with_empty_rules():
    with pytest.raises(ValueError, match="At least one rule must be provided"):
        CompositeRules([])


def test_init_with_invalid_rule_type():
    with pytest.raises(TypeError, match="Rule at index 1 must implement BaseRules"):
        CompositeRules([MockRules(), "invalid"])


def test_matches_any():
    composite = CompositeRules([MockRules(["a.txt"]), MockRules(["b.txt"])])
    assert composite.matches(entry("a.txt"))
    assert composite.matches(entry("b.txt"))
    assert not composite.matches(entry("c.txt"))


def test_short_circuit():
    second = Mock(spec=BaseRules)
    second.matches = Mock(return_value=False)
    composite = CompositeRules([MockRules(["a.txt"]), second])

    assert composite.matches(entry("a.txt"))
    second.matches.assert_not_called()

