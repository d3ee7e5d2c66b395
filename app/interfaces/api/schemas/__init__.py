from .auth import Token
from .group import GroupCreate, GroupRead, GroupSummaryRead, GroupUpdate
from .notice import (
    NoticeCount,
    NoticeCreate,
    NoticeCreated,
    NoticeRead,
    PageRead,
    RecipientDirectoryRead,
)
from .user import RoleRead, UserCreate, UserRead, UserSummaryRead

__all__ = [
    "GroupCreate",
    "GroupRead",
    "GroupSummaryRead",
    "GroupUpdate",
    "NoticeCount",
    "NoticeCreate",
    "NoticeCreated",
    "NoticeRead",
    "PageRead",
    "RecipientDirectoryRead",
    "RoleRead",
    "Token",
    "UserCreate",
    "UserRead",
    "UserSummaryRead",
]
