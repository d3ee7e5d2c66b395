"""Use cases for managing user groups."""

from .create_group import create_group
from .delete_group import delete_group
from .get_group import get_group
from .list_groups import list_groups
from .resolve_group_members import resolve_group_members
from .update_group import update_group

__all__ = [
    "create_group",
    "delete_group",
    "get_group",
    "list_groups",
    "resolve_group_members",
    "update_group",
]
