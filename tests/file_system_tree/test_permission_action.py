"""Unit tests for the permission_action module."""

import pytest

from aidump.file_system_tree.permission_action import PermissionAction


def test_permission_action_enum():
    """Test the PermissionAction enum values."""
    assert PermissionAction.IGNORE == "ignore"
    assert PermissionAction.WARN == "warn"
    assert PermissionAction.RAISE == "raise"

    assert PermissionAction("ignore") == PermissionAction.IGNORE
    assert PermissionAction("warn") == PermissionAction.WARN
    assert PermissionAction("raise") == PermissionAction.RAISE


def test_permission_action_comparison():
    """Test comparing PermissionAction enum with strings."""
    assert "warn" == PermissionAction.WARN
    assert PermissionAction.IGNORE != "raise"
    assert PermissionAction.WARN != PermissionAction.IGNORE


def test_permission_action_rejects_unknown_values():
    with pytest.raises(ValueError):
        PermissionAction("fail")
