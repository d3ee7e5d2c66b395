"""Domain entities exposed by the application."""

from .group import Group
from .notice import NoticeCreationResult, NoticeDelivery
from .recipient import (
    GROUP_PREFIX,
    GroupRecipient,
    RecipientReference,
    UserRecipient,
    parse_recipient_reference,
)
from .role import ADMIN_ROLE_ALIAS, DEFAULT_ROLES, USER_ROLE_ALIAS, Role
from .user import User, UserSummary

__all__ = [
    "ADMIN_ROLE_ALIAS",
    "DEFAULT_ROLES",
    "GROUP_PREFIX",
    "Group",
    "GroupRecipient",
    "NoticeCreationResult",
    "NoticeDelivery",
    "RecipientReference",
    "Role",
    "USER_ROLE_ALIAS",
    "User",
    "UserRecipient",
    "UserSummary",
    "parse_recipient_reference",
]
