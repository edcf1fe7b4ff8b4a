"""
Comments router.

Direct comment access, likes, and the per-user comment views.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ourimpact.crud.comment import comment as crud_comment
from ourimpact.database import get_db
from ourimpact.dependencies.auth import Identity, require_owner_or_admin, require_user
from ourimpact.schemas.comment import (
    CommentDeletedResponse,
    CommentList,
    CommentResponse,
    CommentUpdate,
    CommentUpdatedResponse,
    NewLikeResponse,
    RemovedLikeResponse,
)

router = APIRouter(
    prefix="/comments",
    tags=["comments"],
    responses={
        401: {"description": "Unauthorized"},
        404: {"description": "Not found"},
    },
)

# Registration order matters: the fixed-suffix routes below must be
# matched before /{username}/{comment_id}.


@router.get("/{comment_id}", response_model=CommentResponse)
async def get_comment(
    comment_id: int,
    identity: Identity = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    return CommentResponse(comment=await crud_comment.get_with_likes(db, comment_id))


@router.post("/{comment_id}/add", response_model=NewLikeResponse, status_code=status.HTTP_201_CREATED)
async def add_like(
    comment_id: int,
    identity: Identity = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """Like a comment as the caller. Returns the new like count."""
    new_like = await crud_comment.add_like(db, comment_id=comment_id, from_username=identity.username)
    return NewLikeResponse(new_like=new_like)


@router.delete("/{comment_id}/remove", response_model=RemovedLikeResponse)
async def remove_likes(
    comment_id: int,
    identity: Identity = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """Remove every like on a comment. 404 if it has none."""
    removed = await crud_comment.remove_likes(db, comment_id=comment_id)
    return RemovedLikeResponse(removed_like=removed)


@router.get("/{username}/all", response_model=CommentList)
async def list_user_comments(
    username: str,
    identity: Identity = Depends(require_owner_or_admin),
    db: AsyncSession = Depends(get_db),
):
    return CommentList(comments=await crud_comment.list_for_user(db, username))


@router.get("/{username}/{comment_id}", response_model=CommentResponse)
async def get_user_comment(
    username: str,
    comment_id: int,
    identity: Identity = Depends(require_owner_or_admin),
    db: AsyncSession = Depends(get_db),
):
    return CommentResponse(comment=await crud_comment.get_for_user(db, username, comment_id))


@router.patch("/{username}/{comment_id}", response_model=CommentUpdatedResponse)
async def update_user_comment(
    username: str,
    comment_id: int,
    comment_in: CommentUpdate,
    identity: Identity = Depends(require_owner_or_admin),
    db: AsyncSession = Depends(get_db),
):
    data = comment_in.model_dump(exclude_unset=True, exclude_none=True, by_alias=True)
    updated = await crud_comment.update(db, id=comment_id, data=data, author=username)
    return CommentUpdatedResponse(updated=updated)


@router.delete("/{username}/{comment_id}", response_model=CommentDeletedResponse)
async def delete_user_comment(
    username: str,
    comment_id: int,
    identity: Identity = Depends(require_owner_or_admin),
    db: AsyncSession = Depends(get_db),
):
    deleted = await crud_comment.remove(db, id=comment_id, author=username)
    return CommentDeletedResponse(deleted=deleted)
