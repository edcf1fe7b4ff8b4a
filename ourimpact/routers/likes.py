"""
Likes router (read only).
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ourimpact.crud.like import like as crud_like
from ourimpact.database import get_db
from ourimpact.dependencies.auth import Identity, require_owner_or_admin
from ourimpact.schemas.like import AllLikesResponse, Like, UserLikesResponse

router = APIRouter(
    prefix="/likes",
    tags=["likes"],
)


@router.get("", response_model=AllLikesResponse)
async def list_likes(db: AsyncSession = Depends(get_db)):
    db_likes = await crud_like.get_all(db)
    return AllLikesResponse(all_likes=[Like.model_validate(row) for row in db_likes])


@router.get("/{username}", response_model=UserLikesResponse)
async def list_user_likes(
    username: str,
    identity: Identity = Depends(require_owner_or_admin),
    db: AsyncSession = Depends(get_db),
):
    """Likes given by `username`."""
    db_likes = await crud_like.get_for_user(db, username)
    return UserLikesResponse(user_likes=[Like.model_validate(row) for row in db_likes])
