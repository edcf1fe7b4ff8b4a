"""
Like CRUD operations (read only).

Likes are created and removed through the comment operations.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ourimpact.core.exceptions import NotFoundError
from ourimpact.crud.base import CRUDBase
from ourimpact.models.like import Like
from ourimpact.models.user import User
from ourimpact.schemas.like import Like as LikeSchema


class CRUDLike(CRUDBase[Like, LikeSchema, LikeSchema]):

    async def get_for_user(self, db: AsyncSession, username: str) -> List[Like]:
        """
        Likes given by `username`.

        Raises:
            NotFoundError: If the user does not exist
        """
        result = await db.execute(select(User.id).where(User.username == username))
        if result.scalars().first() is None:
            raise NotFoundError(f"Username : {username} not found")

        result = await db.execute(
            select(Like).where(Like.from_username == username).order_by(Like.id)
        )
        return list(result.scalars().all())


# Create instance of CRUDLike
like = CRUDLike(Like)
