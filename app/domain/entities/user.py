"""Domain entities representing users."""

from dataclasses import dataclass
from datetime import datetime

from .role import ADMIN_ROLE_ALIAS, Role


@dataclass
class User:
    """Core attributes describing an application user."""

    id: str | None
    role: Role
    first_name: str
    last_name: str
    email: str
    password: str
    is_active: bool
    last_login: datetime | None
    created_at: datetime | None
    updated_at: datetime | None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def has_role(self, alias: str) -> bool:
        """Return ``True`` when the user's role alias matches ``alias``."""

        return self.role.alias.lower() == alias.lower()

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(ADMIN_ROLE_ALIAS)


@dataclass(frozen=True)
class UserSummary:
    """Public projection of a user attached to notices and directories."""

    id: str
    first_name: str
    last_name: str
    email: str
    role: str


__all__ = ["User", "UserSummary"]
