"""Domain entity representing a user role."""

from dataclasses import dataclass
from typing import Final

ADMIN_ROLE_ALIAS: Final[str] = "admin"
USER_ROLE_ALIAS: Final[str] = "user"

DEFAULT_ROLES: Final[tuple[tuple[str, str], ...]] = (
    ("Administrator", ADMIN_ROLE_ALIAS),
    ("User", USER_ROLE_ALIAS),
)


@dataclass
class Role:
    """A role assigned to a user; ``alias`` is the stable machine name."""

    id: int
    name: str
    alias: str


__all__ = ["ADMIN_ROLE_ALIAS", "DEFAULT_ROLES", "Role", "USER_ROLE_ALIAS"]
