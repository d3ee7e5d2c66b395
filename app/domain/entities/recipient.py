"""Tagged references to notice recipients.

Clients address notices with plain strings: a bare user id, or a group id
prefixed with ``group:``. The strings are decoded once into
:class:`UserRecipient` / :class:`GroupRecipient` so downstream code never
inspects prefixes again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Union

GROUP_PREFIX: Final[str] = "group:"


@dataclass(frozen=True)
class UserRecipient:
    user_id: str

    def encode(self) -> str:
        return self.user_id


@dataclass(frozen=True)
class GroupRecipient:
    group_id: str

    def encode(self) -> str:
        return f"{GROUP_PREFIX}{self.group_id}"


RecipientReference = Union[UserRecipient, GroupRecipient]


def parse_recipient_reference(raw: str) -> RecipientReference:
    """Decode ``raw`` into a recipient reference.

    Only the exact ``group:`` prefix marks a group; every other string is a
    user id.
    """

    value = raw.strip()
    if value.startswith(GROUP_PREFIX):
        return GroupRecipient(group_id=value[len(GROUP_PREFIX):].strip())
    return UserRecipient(user_id=value)


__all__ = [
    "GROUP_PREFIX",
    "GroupRecipient",
    "RecipientReference",
    "UserRecipient",
    "parse_recipient_reference",
]
