"""Routes for managing user groups."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.groups import (
    create_group as create_group_uc,
    delete_group as delete_group_uc,
    get_group as get_group_uc,
    list_groups as list_groups_uc,
    update_group as update_group_uc,
)
from app.domain.entities import Group, User
from app.domain.exceptions import GroupNotFoundError, GroupValidationError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import require_admin
from app.interfaces.api.schemas import GroupCreate, GroupRead, GroupUpdate

router = APIRouter(prefix="/groups", tags=["groups"])


def _to_read_model(group: Group) -> GroupRead:
    return GroupRead(
        id=group.id,
        name=group.name,
        user_ids=sorted(group.member_ids),
        created_at=group.created_at,
        updated_at=group.updated_at,
    )


@router.get("/", response_model=list[GroupRead])
def list_groups(
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    return [_to_read_model(group) for group in list_groups_uc(db)]


@router.post("/", response_model=GroupRead, status_code=status.HTTP_201_CREATED)
def create_group(
    group_in: GroupCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Create a group with its initial members."""

    try:
        group = create_group_uc(
            db,
            name=group_in.name,
            member_ids=[str(user_id) for user_id in group_in.user_ids],
        )
    except GroupValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read_model(group)


@router.get("/{group_id}", response_model=GroupRead)
def read_group(
    group_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    try:
        group = get_group_uc(db, group_id)
    except GroupNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _to_read_model(group)


@router.put("/{group_id}", response_model=GroupRead)
def update_group(
    group_id: str,
    group_in: GroupUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Rename a group and/or replace its members."""

    member_ids = (
        [str(user_id) for user_id in group_in.user_ids]
        if group_in.user_ids is not None
        else None
    )
    try:
        group = update_group_uc(db, group_id, name=group_in.name, member_ids=member_ids)
    except GroupNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except GroupValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read_model(group)


@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_group(
    group_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> Response:
    try:
        delete_group_uc(db, group_id)
    except GroupNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
