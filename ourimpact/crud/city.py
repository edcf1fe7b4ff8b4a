"""
City CRUD operations.

Cities are seeded once and read-only through the API. Comments are
created here because a comment always belongs to a city.
"""

from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ourimpact.core.exceptions import BadRequestError, NotFoundError
from ourimpact.crud.base import CRUDBase
from ourimpact.crud.comment import comment as crud_comment
from ourimpact.models.city import City
from ourimpact.models.comment import Comment
from ourimpact.models.user import User
from ourimpact.schemas.city import City as CitySchema
from ourimpact.schemas.city import CityWithComments
from ourimpact.schemas.comment import CommentWithLikes
from ourimpact.utils.logging_config import get_logger

logger = get_logger(__name__)


class CRUDCity(CRUDBase[City, CitySchema, CitySchema]):
    """
    CRUD operations for City model.
    """

    async def get_by_name(self, db: AsyncSession, name: str) -> City:
        """
        Get a city by name.

        Args:
            db: Database session
            name: City name, e.g. "Dallas"

        Returns:
            City instance

        Raises:
            NotFoundError: If no city has this name
        """
        result = await db.execute(select(City).where(City.name == name))
        db_city = result.scalars().first()
        if db_city is None:
            raise NotFoundError(f"City not found: {name}")
        return db_city

    async def name_exists(self, db: AsyncSession, name: str) -> bool:
        result = await db.execute(select(City.id).where(City.name == name))
        return result.scalars().first() is not None

    async def get_with_comments(self, db: AsyncSession, name: str) -> CityWithComments:
        """
        Get a city and its comments, most liked first.

        Raises:
            NotFoundError: If no city has this name
        """
        db_city = await self.get_by_name(db, name)
        comments = await crud_comment.list_for_city(db, name)
        return CityWithComments(
            **CitySchema.model_validate(db_city).model_dump(),
            comments=comments,
        )

    async def add_comment(
        self,
        db: AsyncSession,
        *,
        comment_text: str,
        author: str,
        city_name: str,
    ) -> CommentWithLikes:
        """
        Create a comment on a city.

        The city is checked before the author. Both checks and the insert
        share one transaction; the foreign keys reject anything that slips
        past them.

        Args:
            db: Database session
            comment_text: Body of the comment
            author: Username of the author
            city_name: City being commented on

        Returns:
            The new comment with a like count of 0

        Raises:
            BadRequestError: If the city or the author does not exist
        """
        if not await self.name_exists(db, city_name):
            raise BadRequestError(f"Invalid city name: {city_name}")

        result = await db.execute(select(User.id).where(User.username == author))
        if result.scalars().first() is None:
            raise BadRequestError(f"Invalid username: {author}")

        db_comment = Comment(comment_text=comment_text, username=author, city_name=city_name)
        db.add(db_comment)
        await self.commit(db)
        await db.refresh(db_comment)

        logger.info(f"Comment {db_comment.id} added to {city_name} by {author}")
        return CommentWithLikes(
            id=db_comment.id,
            comment=db_comment.comment_text,
            username=db_comment.username,
            city_name=db_comment.city_name,
            likes=0,
        )

    async def update_comment(
        self,
        db: AsyncSession,
        *,
        id: int,
        data: Dict[str, Any],
        author: Optional[str] = None,
    ) -> str:
        return await crud_comment.update(db, id=id, data=data, author=author)

    async def delete_comment(
        self,
        db: AsyncSession,
        *,
        id: int,
        author: Optional[str] = None,
    ) -> int:
        return await crud_comment.remove(db, id=id, author=author)


# Create instance of CRUDCity
city = CRUDCity(City)
