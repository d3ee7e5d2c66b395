"""Repository implementations for infrastructure layer."""

from .group_repository import GroupRepository
from .notice_repository import NoticeRepository
from .role_repository import RoleRepository
from .user_repository import UserRepository

__all__ = [
    "GroupRepository",
    "NoticeRepository",
    "RoleRepository",
    "UserRepository",
]
