"""Persistence helpers for notice deliveries."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import func, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from app.domain.entities import NoticeDelivery
from app.infrastructure.models import NoticeModel
from app.infrastructure.repositories.user_repository import UserRepository
from app.utils import (
    PaginationParams,
    ensure_app_naive_datetime,
    ensure_app_timezone,
)

SORTABLE_COLUMNS = {
    "created_at": NoticeModel.created_at,
    "read_at": NoticeModel.read_at,
    "is_read": NoticeModel.is_read,
}
DEFAULT_SORT_COLUMN = "created_at"


class NoticeRepository:
    """Provide storage operations for :class:`NoticeDelivery` rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notice_id: str) -> NoticeDelivery | None:
        model = self.session.get(NoticeModel, notice_id)
        return self._to_entity(model) if model else None

    def create_many(self, deliveries: Sequence[NoticeDelivery]) -> int:
        """Insert every delivery in a single transaction.

        Either the whole batch is committed or, on any store error, nothing is
        and the error is re-raised.
        """

        if not deliveries:
            return 0
        models = []
        for delivery in deliveries:
            model = NoticeModel()
            self._apply_entity_to_model(model, delivery)
            models.append(model)
        try:
            self.session.add_all(models)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        return len(models)

    def list_for_recipient(
        self,
        recipient_id: str,
        *,
        params: PaginationParams,
        is_read: bool | None = None,
    ) -> tuple[list[NoticeDelivery], int]:
        query = self.session.query(NoticeModel).filter(
            NoticeModel.recipient_id == recipient_id
        )
        if is_read is not None:
            query = query.filter(NoticeModel.is_read.is_(is_read))
        return self._paginate(query, params, include_author=True, include_recipient=False)

    def list_for_author(
        self, author_id: str, *, params: PaginationParams
    ) -> tuple[list[NoticeDelivery], int]:
        query = self.session.query(NoticeModel).filter(NoticeModel.author_id == author_id)
        return self._paginate(query, params, include_author=False, include_recipient=True)

    def set_read_state(
        self, notice_id: str, *, is_read: bool, read_at: datetime | None
    ) -> NoticeDelivery:
        """Overwrite the read flag and timestamp of one delivery."""

        model = self.session.get(NoticeModel, notice_id)
        if model is None:
            msg = f"Notice with id {notice_id} not found"
            raise ValueError(msg)
        model.is_read = is_read
        model.read_at = ensure_app_naive_datetime(read_at) if is_read else None
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_all_read(self, recipient_id: str, *, read_at: datetime) -> int:
        """Mark every unread delivery of ``recipient_id`` as read in one statement."""

        statement = (
            update(NoticeModel)
            .where(NoticeModel.recipient_id == recipient_id)
            .where(NoticeModel.is_read.is_(False))
            .values(is_read=True, read_at=ensure_app_naive_datetime(read_at))
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(statement)
        self.session.commit()
        return result.rowcount or 0

    def count_unread(self, recipient_id: str) -> int:
        count = (
            self.session.query(func.count(NoticeModel.id))
            .filter(NoticeModel.recipient_id == recipient_id)
            .filter(NoticeModel.is_read.is_(False))
            .scalar()
        )
        return int(count or 0)

    def delete(self, notice_id: str) -> None:
        model = self.session.get(NoticeModel, notice_id)
        if model is None:
            msg = f"Notice with id {notice_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def _paginate(
        self,
        query: Query,
        params: PaginationParams,
        *,
        include_author: bool,
        include_recipient: bool,
    ) -> tuple[list[NoticeDelivery], int]:
        total = query.order_by(None).count()
        column = SORTABLE_COLUMNS.get(params.sort_by or "", SORTABLE_COLUMNS[DEFAULT_SORT_COLUMN])
        ordering = column.asc() if params.sort_order == "asc" else column.desc()
        models = (
            query.order_by(ordering, NoticeModel.id.asc())
            .offset(params.skip)
            .limit(params.limit)
            .all()
        )
        items = [
            self._to_entity(
                model,
                include_author=include_author,
                include_recipient=include_recipient,
            )
            for model in models
        ]
        return items, total

    @staticmethod
    def _apply_entity_to_model(model: NoticeModel, delivery: NoticeDelivery) -> None:
        if delivery.id is not None:
            model.id = delivery.id
        model.content = delivery.content
        model.author_id = delivery.author_id
        model.recipient_id = delivery.recipient_id
        model.is_read = delivery.is_read
        model.read_at = ensure_app_naive_datetime(delivery.read_at) if delivery.is_read else None
        model.created_at = ensure_app_naive_datetime(delivery.created_at)

    @staticmethod
    def _to_entity(
        model: NoticeModel,
        *,
        include_author: bool = True,
        include_recipient: bool = True,
    ) -> NoticeDelivery:
        return NoticeDelivery(
            id=model.id,
            content=model.content,
            author_id=model.author_id,
            recipient_id=model.recipient_id,
            is_read=bool(model.is_read),
            read_at=ensure_app_timezone(model.read_at),
            created_at=ensure_app_timezone(model.created_at),
            author=(
                UserRepository.to_summary(model.author)
                if include_author and model.author is not None
                else None
            ),
            recipient=(
                UserRepository.to_summary(model.recipient)
                if include_recipient and model.recipient is not None
                else None
            ),
        )


__all__ = ["NoticeRepository", "SORTABLE_COLUMNS"]
