"""Unit tests for the permission_action module."""

from fstree.file_tree.permission_action import PermissionAction


def test_permission_action_enum():
    """Test the PermissionAction enum values."""
    assert PermissionAction.IGNORE == "ignore"
    assert PermissionAction.RAISE == "raise"

    assert PermissionAction("ignore") == PermissionAction.IGNORE
    assert PermissionAction("raise") == PermissionAction.RAISE


def test_permission_action_comparison():
    assert "ignore" == PermissionAction.IGNORE
    assert PermissionAction.IGNORE != "raise"
    assert PermissionAction.RAISE != "ignore"
