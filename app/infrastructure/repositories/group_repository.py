"""Persistence helpers for user groups and their membership."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.domain.entities import Group
from app.infrastructure.models import GroupModel, UserModel, group_member_table
from app.utils import ensure_app_naive_datetime, ensure_app_timezone


class GroupRepository:
    """Provide CRUD operations for :class:`Group` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Group]:
        query = self.session.query(GroupModel).order_by(GroupModel.name.asc())
        return [self._to_entity(model) for model in query.all()]

    def list_names(self) -> list[tuple[str, str]]:
        """Return ``(id, name)`` pairs ordered by name without loading members."""

        query = self.session.query(GroupModel.id, GroupModel.name).order_by(
            GroupModel.name.asc()
        )
        return [(group_id, name) for group_id, name in query.all()]

    def get(self, group_id: str) -> Group | None:
        model = self.session.get(GroupModel, group_id)
        return self._to_entity(model) if model else None

    def member_ids(self, group_id: str) -> set[str]:
        """Return the ids of the users in ``group_id``; empty for unknown groups."""

        statement = select(group_member_table.c.user_id).where(
            group_member_table.c.group_id == group_id
        )
        return set(self.session.execute(statement).scalars().all())

    def create(self, group: Group) -> Group:
        model = GroupModel()
        if group.id is not None:
            model.id = group.id
        model.name = group.name
        if group.created_at is not None:
            model.created_at = ensure_app_naive_datetime(group.created_at)
        model.members = self._load_members(group.member_ids)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(
        self,
        group_id: str,
        *,
        name: str | None = None,
        member_ids: Iterable[str] | None = None,
    ) -> Group:
        """Rename and/or replace the membership of a group in one transaction."""

        model = self.session.get(GroupModel, group_id)
        if model is None:
            msg = f"Group with id {group_id} not found"
            raise ValueError(msg)
        if name is not None:
            model.name = name
        if member_ids is not None:
            model.members = self._load_members(member_ids)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, group_id: str) -> None:
        model = self.session.get(GroupModel, group_id)
        if model is None:
            msg = f"Group with id {group_id} not found"
            raise ValueError(msg)
        # Membership rows are removed together with the group in the same flush.
        self.session.delete(model)
        self.session.commit()

    def _load_members(self, member_ids: Iterable[str]) -> list[UserModel]:
        ids = set(member_ids)
        if not ids:
            return []
        return self.session.query(UserModel).filter(UserModel.id.in_(ids)).all()

    @staticmethod
    def _to_entity(model: GroupModel) -> Group:
        return Group(
            id=model.id,
            name=model.name,
            member_ids={member.id for member in model.members},
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["GroupRepository"]
