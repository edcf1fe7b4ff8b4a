"""
User CRUD operations.

This module contains CRUD operations specific to user management.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ourimpact.core.exceptions import BadRequestError, NotFoundError, UnauthorizedError
from ourimpact.crud.base import CRUDBase
from ourimpact.crud.comment import comment as crud_comment
from ourimpact.models.city import City
from ourimpact.models.user import User
from ourimpact.schemas.user import UserCreate, UserProfile, UserUpdate, UserWithComments
from ourimpact.utils.logging_config import get_logger
from ourimpact.utils.security import get_password_hash, verify_password
from ourimpact.utils.sql import sql_for_partial_update

logger = get_logger(__name__)

# API field name -> column name
USER_UPDATE_FIELDS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "email": "email",
    "userCity": "city_name",
    "password": "hashed_password",
}


class CRUDUser(CRUDBase[User, UserCreate, UserUpdate]):
    """
    CRUD operations for User model.
    """

    async def get_by_username(self, db: AsyncSession, *, username: str) -> Optional[User]:
        """
        Get user by username.

        Args:
            db: Database session
            username: Username

        Returns:
            User instance or None if not found
        """
        result = await db.execute(select(User).where(User.username == username))
        return result.scalars().first()

    async def get_by_username_or_404(self, db: AsyncSession, *, username: str) -> User:
        db_user = await self.get_by_username(db, username=username)
        if db_user is None:
            raise NotFoundError(f"Username : {username} not found")
        return db_user

    @staticmethod
    async def _ensure_city(db: AsyncSession, city_name: Optional[str]) -> None:
        if city_name is None:
            return
        result = await db.execute(select(City.id).where(City.name == city_name))
        if result.scalars().first() is None:
            raise BadRequestError(f"Invalid city name: {city_name}")

    async def register(self, db: AsyncSession, *, obj_in: UserCreate, is_admin: bool = False) -> User:
        """
        Create a new user with a hashed password.

        Args:
            db: Database session
            obj_in: User registration data
            is_admin: Admin flag for the new account

        Returns:
            Created user instance

        Raises:
            BadRequestError: If the username is taken or the home city is unknown
        """
        if await self.get_by_username(db, username=obj_in.username):
            raise BadRequestError(f"Duplicate username: {obj_in.username}")
        await self._ensure_city(db, obj_in.user_city)

        db_obj = User(
            username=obj_in.username,
            hashed_password=get_password_hash(obj_in.password),
            first_name=obj_in.first_name,
            last_name=obj_in.last_name,
            email=obj_in.email,
            user_city=obj_in.user_city,
            is_admin=is_admin,
        )
        db.add(db_obj)
        await self.commit(db)
        await db.refresh(db_obj)

        logger.info(f"Registered {'admin' if is_admin else 'user'}: {db_obj.username}")
        return db_obj

    async def register_admin(self, db: AsyncSession, *, obj_in: UserCreate) -> User:
        """Create a new admin user. Callers must already be admins."""
        return await self.register(db, obj_in=obj_in, is_admin=True)

    async def authenticate(self, db: AsyncSession, *, username: str, password: str) -> User:
        """
        Check a username/password pair.

        Unknown usernames and wrong passwords fail with the same error.

        Raises:
            UnauthorizedError: If the credentials do not match a user
        """
        db_user = await self.get_by_username(db, username=username)
        if db_user is None or not verify_password(password, db_user.hashed_password):
            logger.warning(f"Failed login for username: {username}")
            raise UnauthorizedError("Invalid username/password")
        return db_user

    async def get_with_comments(self, db: AsyncSession, *, username: str) -> UserWithComments:
        """
        Get a user's profile and the comments they wrote, most liked first.

        Raises:
            NotFoundError: If the user does not exist
        """
        db_user = await self.get_by_username_or_404(db, username=username)
        comments = await crud_comment.list_for_user(db, username)
        return UserWithComments(
            **UserProfile.model_validate(db_user).model_dump(),
            comments=comments,
        )

    async def update(self, db: AsyncSession, *, username: str, data: Dict[str, Any]) -> User:
        """
        Partially update a user.

        Args:
            db: Database session
            username: User to update
            data: Fields to change, keyed by API name. A new password is
                hashed before it is stored.

        Returns:
            Updated user instance

        Raises:
            BadRequestError: If `data` is empty, names a field that cannot be
                updated, or points at an unknown home city
            NotFoundError: If the user does not exist
        """
        data = dict(data)
        if data.get("password"):
            data["password"] = get_password_hash(data["password"])
        partial = sql_for_partial_update(data, USER_UPDATE_FIELDS)

        db_user = await self.get_by_username_or_404(db, username=username)
        await self._ensure_city(db, data.get("userCity"))

        table = User.__table__
        await db.execute(
            update(table)
            .where(table.c.username == username)
            .values(partial.as_values())
        )
        await self.commit(db)
        await db.refresh(db_user)
        return db_user

    async def remove(self, db: AsyncSession, *, username: str) -> str:
        """
        Delete a user. Their comments and likes go with them.

        Raises:
            NotFoundError: If the user does not exist
        """
        db_user = await self.get_by_username_or_404(db, username=username)
        await db.delete(db_user)
        await db.commit()
        logger.info(f"Deleted user: {username}")
        return username

    async def get_admins(self, db: AsyncSession) -> List[User]:
        result = await db.execute(select(User).where(User.is_admin.is_(True)).order_by(User.id))
        return list(result.scalars().all())


# Create instance of CRUDUser
user = CRUDUser(User)
