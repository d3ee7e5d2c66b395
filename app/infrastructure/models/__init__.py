"""ORM models used by the application infrastructure."""

from .group import GroupModel, group_member_table
from .notice import NoticeModel
from .role import RoleModel
from .user import UserModel

__all__ = [
    "GroupModel",
    "NoticeModel",
    "RoleModel",
    "UserModel",
    "group_member_table",
]
