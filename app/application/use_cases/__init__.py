"""Aggregate application use cases."""

from .notices import create_notice, mark_notice_read, mark_notice_unread
from .users import authenticate_user, create_user, record_login

__all__ = [
    "authenticate_user",
    "create_notice",
    "create_user",
    "mark_notice_read",
    "mark_notice_unread",
    "record_login",
]
