"""
Users router.

Admin listings and admin creation, plus owner-or-admin access to a
single user's profile.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ourimpact.crud.user import user as crud_user
from ourimpact.database import get_db
from ourimpact.dependencies.auth import Identity, require_admin, require_owner_or_admin
from ourimpact.schemas.user import (
    AdminList,
    TokenResponse,
    UserCreate,
    UserDeletedResponse,
    UserDetailResponse,
    UserList,
    UserProfile,
    UserResponse,
    UserUpdate,
)
from ourimpact.utils.security import create_access_token

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={
        401: {"description": "Unauthorized"},
        404: {"description": "Not found"},
    },
)


@router.get("/admin/all-users", response_model=UserList)
async def list_users(
    admin: Identity = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    db_users = await crud_user.get_all(db)
    return UserList(users=[UserProfile.model_validate(u) for u in db_users])


@router.get("/admins", response_model=AdminList)
async def list_admins(
    admin: Identity = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    db_admins = await crud_user.get_admins(db)
    return AdminList(admins=[UserProfile.model_validate(u) for u in db_admins])


@router.post("/admin/new-admin", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register_admin(
    user_in: UserCreate,
    admin: Identity = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Create another admin account. Admins only."""
    db_user = await crud_user.register_admin(db, obj_in=user_in)
    return TokenResponse(token=create_access_token(db_user.username, db_user.is_admin))


@router.get("/{username}", response_model=UserDetailResponse)
async def get_user(
    username: str,
    identity: Identity = Depends(require_owner_or_admin),
    db: AsyncSession = Depends(get_db),
):
    """Profile plus the user's comments, most liked first."""
    return UserDetailResponse(user=await crud_user.get_with_comments(db, username=username))


@router.patch("/{username}", response_model=UserResponse)
async def update_user(
    username: str,
    user_in: UserUpdate,
    identity: Identity = Depends(require_owner_or_admin),
    db: AsyncSession = Depends(get_db),
):
    """
    Partially update a user.

    Accepts any of firstName, lastName, email, userCity and password.
    An empty body is a 400.
    """
    data = user_in.model_dump(exclude_unset=True, exclude_none=True, by_alias=True)
    db_user = await crud_user.update(db, username=username, data=data)
    return UserResponse(user=UserProfile.model_validate(db_user))


@router.delete("/{username}", response_model=UserDeletedResponse)
async def delete_user(
    username: str,
    identity: Identity = Depends(require_owner_or_admin),
    db: AsyncSession = Depends(get_db),
):
    return UserDeletedResponse(deleted=await crud_user.remove(db, username=username))
