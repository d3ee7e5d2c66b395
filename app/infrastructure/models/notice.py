"""SQLAlchemy model for persisted notice deliveries."""

import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


def _new_id() -> str:
    return str(uuid.uuid4())


class NoticeModel(Base):
    """One row per (notice content, recipient) pair."""

    __tablename__ = "notice"
    __table_args__ = (Index("ix_notice_recipient_is_read", "recipient_id", "is_read"),)

    id = Column(String(36), primary_key=True, default=_new_id)
    content = Column(Text, nullable=False)
    author_id = Column(
        String(36), ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    recipient_id = Column(
        String(36), ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    is_read = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    read_at = Column(DateTime(), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    author = relationship("UserModel", foreign_keys=[author_id], lazy="joined")
    recipient = relationship("UserModel", foreign_keys=[recipient_id], lazy="joined")


__all__ = ["NoticeModel"]
