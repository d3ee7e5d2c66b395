"""Errors raised by application use cases.

Each failure class maps to exactly one kind of API response; routers
translate them into HTTP errors.
"""


class NoticeValidationError(ValueError):
    """The notice request is malformed (empty content or recipient list)."""


class NoValidRecipientsError(NoticeValidationError):
    """The recipient list resolved to zero users."""

    def __init__(self, message: str = "No valid recipients found") -> None:
        super().__init__(message)


class NoticeNotFoundError(LookupError):
    """The targeted notice delivery does not exist."""

    def __init__(self, message: str = "Notice not found") -> None:
        super().__init__(message)


class NoticeAccessDeniedError(PermissionError):
    """The requesting user does not own the attempted notice mutation."""


class GroupValidationError(ValueError):
    """The group payload is invalid."""


class GroupNotFoundError(LookupError):
    """The targeted group does not exist."""

    def __init__(self, message: str = "Group not found") -> None:
        super().__init__(message)


class UserValidationError(ValueError):
    """The user payload is invalid (duplicate email, unknown role)."""


class UserNotFoundError(LookupError):
    """The targeted user does not exist."""

    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message)


__all__ = [
    "GroupNotFoundError",
    "GroupValidationError",
    "NoValidRecipientsError",
    "NoticeAccessDeniedError",
    "NoticeNotFoundError",
    "NoticeValidationError",
    "UserNotFoundError",
    "UserValidationError",
]
