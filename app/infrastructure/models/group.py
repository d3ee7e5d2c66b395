"""SQLAlchemy models for user groups and their membership edges."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, String, Table
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime

group_member_table = Table(
    "group_member",
    Base.metadata,
    Column(
        "group_id",
        String(36),
        ForeignKey("user_group.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "user_id",
        String(36),
        ForeignKey("user.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)


def _new_id() -> str:
    return str(uuid.uuid4())


class GroupModel(Base):
    """Database representation of a named group of users."""

    __tablename__ = "user_group"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(100), nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime, nullable=True, onupdate=now_in_app_naive_datetime)

    members = relationship(
        "UserModel",
        secondary=group_member_table,
        back_populates="groups",
        lazy="selectin",
    )


__all__ = ["GroupModel", "group_member_table"]
