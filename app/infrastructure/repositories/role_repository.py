"""Persistence layer for roles data."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import DEFAULT_ROLES, Role
from app.infrastructure.models import RoleModel


class RoleRepository:
    """Provide read access to roles stored in the database."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_alias(self, alias: str) -> Role | None:
        model = (
            self.session.query(RoleModel)
            .filter(func.lower(RoleModel.alias) == alias.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def list_aliases(self) -> set[str]:
        """Return the set of role aliases stored in the database."""

        aliases = self.session.query(RoleModel.alias).all()
        return {alias.lower() for (alias,) in aliases}

    def ensure_defaults(self) -> list[str]:
        """Insert the built-in roles that are missing and return their aliases."""

        existing = self.list_aliases()
        missing = [(name, alias) for name, alias in DEFAULT_ROLES if alias not in existing]
        if not missing:
            return []
        self.session.add_all(RoleModel(name=name, alias=alias) for name, alias in missing)
        self.session.commit()
        return [alias for _, alias in missing]

    @staticmethod
    def _to_entity(model: RoleModel) -> Role:
        return Role(id=model.id, name=model.name, alias=model.alias)


__all__ = ["RoleRepository"]
