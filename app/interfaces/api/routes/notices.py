"""Endpoints for sending notices and managing their read state."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.notices import (
    count_unread_notices,
    create_notice as create_notice_uc,
    delete_notice as delete_notice_uc,
    get_notice as get_notice_uc,
    list_inbox,
    list_recipient_candidates,
    list_sent,
    mark_all_notices_read,
    mark_notice_read,
    mark_notice_unread,
)
from app.domain.entities import NoticeDelivery, User
from app.domain.exceptions import (
    NoticeAccessDeniedError,
    NoticeNotFoundError,
    NoticeValidationError,
)
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user, get_pagination
from app.interfaces.api.schemas import (
    NoticeCount,
    NoticeCreate,
    NoticeCreated,
    NoticeRead,
    PageRead,
    RecipientDirectoryRead,
)
from app.utils import Page, PaginationParams

router = APIRouter(prefix="/notices", tags=["notices"])


def _to_read_model(notice: NoticeDelivery) -> NoticeRead:
    return NoticeRead.model_validate(notice)


def _to_page(page: Page[NoticeDelivery]) -> PageRead[NoticeRead]:
    return PageRead[NoticeRead](
        data=[_to_read_model(notice) for notice in page.data],
        total=page.total,
        page=page.page,
        limit=page.limit,
        total_pages=page.total_pages,
        has_next=page.has_next,
        has_prev=page.has_prev,
    )


def _not_found(exc: NoticeNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


def _forbidden(exc: NoticeAccessDeniedError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))


@router.get("/", response_model=PageRead[NoticeRead])
def list_received_notices(
    is_read: bool | None = Query(None, description="Filter by read state"),
    pagination: PaginationParams = Depends(get_pagination),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Return the authenticated user's inbox."""

    page = list_inbox(db, current_user.id, pagination=pagination, is_read=is_read)
    return _to_page(page)


@router.post("/", response_model=NoticeCreated, status_code=status.HTTP_201_CREATED)
def create_notice(
    notice_in: NoticeCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Send a notice to users and groups; one delivery is stored per recipient."""

    try:
        result = create_notice_uc(
            db,
            author_id=current_user.id,
            content=notice_in.content,
            recipients=notice_in.references(),
        )
    except NoticeValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return NoticeCreated(count=result.count)


@router.get("/sent", response_model=PageRead[NoticeRead])
def list_sent_notices(
    pagination: PaginationParams = Depends(get_pagination),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Return the deliveries authored by the authenticated user."""

    return _to_page(list_sent(db, current_user.id, pagination=pagination))


@router.get("/unread-count", response_model=NoticeCount)
def read_unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    return NoticeCount(count=count_unread_notices(db, current_user.id))


@router.get("/recipients", response_model=RecipientDirectoryRead)
def list_recipients(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Return the users and groups that can be addressed by a notice."""

    return RecipientDirectoryRead.model_validate(list_recipient_candidates(db))


@router.patch("/mark-all-read", response_model=NoticeCount)
def mark_all_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Mark every unread notice of the authenticated user as read."""

    return NoticeCount(count=mark_all_notices_read(db, current_user.id))


@router.get("/{notice_id}", response_model=NoticeRead)
def read_notice(
    notice_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        notice = get_notice_uc(db, notice_id, requesting_user=current_user)
    except NoticeNotFoundError as exc:
        raise _not_found(exc) from exc
    except NoticeAccessDeniedError as exc:
        raise _forbidden(exc) from exc
    return _to_read_model(notice)


@router.patch("/{notice_id}/read", response_model=NoticeRead)
def mark_read(
    notice_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Mark a received notice as read."""

    try:
        notice = mark_notice_read(db, notice_id, current_user.id)
    except NoticeNotFoundError as exc:
        raise _not_found(exc) from exc
    except NoticeAccessDeniedError as exc:
        raise _forbidden(exc) from exc
    return _to_read_model(notice)


@router.patch("/{notice_id}/unread", response_model=NoticeRead)
def mark_unread(
    notice_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Mark a received notice as unread."""

    try:
        notice = mark_notice_unread(db, notice_id, current_user.id)
    except NoticeNotFoundError as exc:
        raise _not_found(exc) from exc
    except NoticeAccessDeniedError as exc:
        raise _forbidden(exc) from exc
    return _to_read_model(notice)


@router.delete("/{notice_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_notice(
    notice_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    """Delete a notice delivery; allowed for its author or an administrator."""

    try:
        delete_notice_uc(
            db,
            notice_id,
            requesting_user_id=current_user.id,
            requesting_role=current_user.role.alias,
        )
    except NoticeNotFoundError as exc:
        raise _not_found(exc) from exc
    except NoticeAccessDeniedError as exc:
        raise _forbidden(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
