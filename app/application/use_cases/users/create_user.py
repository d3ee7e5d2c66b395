"""Use case for creating users."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import USER_ROLE_ALIAS, User
from app.domain.exceptions import UserValidationError
from app.infrastructure.repositories import RoleRepository, UserRepository
from app.infrastructure.security import get_password_hash
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def create_user(
    session: Session,
    *,
    first_name: str,
    last_name: str,
    email: str,
    password: str,
    role_alias: str = USER_ROLE_ALIAS,
) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)
    role_repository = RoleRepository(session)

    normalized_email = email.strip().lower()
    if repository.get_by_email(normalized_email):
        raise UserValidationError("Email is already registered")

    role = role_repository.get_by_alias(role_alias)
    if role is None:
        raise UserValidationError(f"Unknown role '{role_alias}'")

    first = first_name.strip()
    last = last_name.strip()
    if not first or not last:
        raise UserValidationError("First and last name are required")

    user = User(
        id=None,
        role=role,
        first_name=first,
        last_name=last,
        email=normalized_email,
        password=get_password_hash(password),
        is_active=True,
        last_login=None,
        created_at=now_in_app_timezone(),
        updated_at=None,
    )
    saved = repository.create(user)
    logger.info("Created user %s with role %s", saved.id, role.alias)
    return saved
