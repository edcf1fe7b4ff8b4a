"""
Cities router.

City listings are public. Reading comments needs a login; changing or
deleting one needs its author or an admin.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ourimpact.core.exceptions import UnauthorizedError
from ourimpact.crud.city import city as crud_city
from ourimpact.crud.comment import comment as crud_comment
from ourimpact.database import get_db
from ourimpact.dependencies.auth import Identity, require_owner_or_admin, require_user
from ourimpact.schemas.city import City, CityDataResponse, CityList, CityResponse
from ourimpact.schemas.comment import (
    CommentCreate,
    CommentDeletedResponse,
    CommentResponse,
    CommentUpdate,
    CommentUpdatedResponse,
)

router = APIRouter(
    prefix="/cities",
    tags=["cities"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=CityList)
async def list_cities(db: AsyncSession = Depends(get_db)):
    db_cities = await crud_city.get_all(db)
    return CityList(cities=[City.model_validate(c) for c in db_cities])


@router.get("/{city_name}", response_model=CityResponse)
async def get_city(city_name: str, db: AsyncSession = Depends(get_db)):
    return CityResponse(city=City.model_validate(await crud_city.get_by_name(db, city_name)))


@router.get("/{city_name}/comments", response_model=CityDataResponse)
async def get_city_comments(
    city_name: str,
    identity: Identity = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """City plus its comments, most liked first."""
    return CityDataResponse(city_data=await crud_city.get_with_comments(db, city_name))


@router.get("/{city_name}/comments/{comment_id}", response_model=CommentResponse)
async def get_city_comment(
    city_name: str,
    comment_id: int,
    identity: Identity = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    return CommentResponse(comment=await crud_comment.get_with_likes(db, comment_id))


@router.post("/{city_name}/comments/new", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def add_comment(
    city_name: str,
    comment_in: CommentCreate,
    identity: Identity = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Post a comment on a city.

    `author` must be the caller unless the caller is an admin.
    `locationName` defaults to the city in the path.
    """
    if not identity.is_admin and comment_in.author != identity.username:
        raise UnauthorizedError("Unauthorized")

    new_comment = await crud_city.add_comment(
        db,
        comment_text=comment_in.comment_text,
        author=comment_in.author,
        city_name=comment_in.location_name or city_name,
    )
    return CommentResponse(comment=new_comment)


@router.patch("/{city_name}/{username}/comments/edit/{comment_id}", response_model=CommentUpdatedResponse)
async def update_city_comment(
    city_name: str,
    username: str,
    comment_id: int,
    comment_in: CommentUpdate,
    identity: Identity = Depends(require_owner_or_admin),
    db: AsyncSession = Depends(get_db),
):
    data = comment_in.model_dump(exclude_unset=True, exclude_none=True, by_alias=True)
    updated = await crud_city.update_comment(db, id=comment_id, data=data, author=username)
    return CommentUpdatedResponse(updated=updated)


@router.delete("/{city_name}/{username}/comments/delete/{comment_id}", response_model=CommentDeletedResponse)
async def delete_city_comment(
    city_name: str,
    username: str,
    comment_id: int,
    identity: Identity = Depends(require_owner_or_admin),
    db: AsyncSession = Depends(get_db),
):
    deleted = await crud_city.delete_comment(db, id=comment_id, author=username)
    return CommentDeletedResponse(deleted=deleted)
