"""Common validation helpers for group use cases."""

from collections.abc import Sequence

from app.domain.exceptions import GroupValidationError
from app.infrastructure.repositories import UserRepository

GROUP_NAME_MAX_LENGTH = 100


def ensure_valid_group_name(name: str) -> str:
    """Return the stripped group name or raise ``GroupValidationError``."""

    normalized = (name or "").strip()
    if not normalized:
        raise GroupValidationError("Group name is required")
    if len(normalized) > GROUP_NAME_MAX_LENGTH:
        raise GroupValidationError(
            f"Group name must be at most {GROUP_NAME_MAX_LENGTH} characters"
        )
    return normalized


def ensure_valid_members(member_ids: Sequence[str], repository: UserRepository) -> set[str]:
    """Check that members are present, unique and refer to existing users."""

    if not member_ids:
        raise GroupValidationError("At least one member is required")
    unique_ids = set(member_ids)
    if len(unique_ids) != len(member_ids):
        raise GroupValidationError("Duplicate user IDs are not allowed")
    missing = unique_ids - repository.existing_ids(unique_ids)
    if missing:
        raise GroupValidationError(f"Unknown user IDs: {', '.join(sorted(missing))}")
    return unique_ids
