"""
Authentication router.

Login and self-service registration. Both hand back a signed bearer
token carrying the username and admin flag.
"""

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from ourimpact.config import settings
from ourimpact.crud.user import user as crud_user
from ourimpact.database import get_db
from ourimpact.schemas.user import TokenResponse, UserCreate, UserLogin
from ourimpact.utils.limiter import limiter
from ourimpact.utils.security import create_access_token

router = APIRouter(
    prefix="/auth",
    tags=["authentication"],
    responses={401: {"description": "Unauthorized"}},
)


@router.post("/token", response_model=TokenResponse)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login(
    request: Request,
    credentials: UserLogin,
    db: AsyncSession = Depends(get_db),
):
    """
    Authenticate a user and return an access token.

    Unknown usernames and wrong passwords get the same 401.
    """
    db_user = await crud_user.authenticate(
        db, username=credentials.username, password=credentials.password
    )
    return TokenResponse(token=create_access_token(db_user.username, db_user.is_admin))


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.REGISTER_RATE_LIMIT)
async def register(
    request: Request,
    user_in: UserCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    Register a new (non-admin) user and return an access token.

    400 if the username is taken or the home city is unknown.
    """
    db_user = await crud_user.register(db, obj_in=user_in)
    return TokenResponse(token=create_access_token(db_user.username, db_user.is_admin))
