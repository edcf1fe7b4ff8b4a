"""
Comment CRUD operations.

Every read of a comment goes through `_select_with_likes`, so the like
count is computed the same way whether a comment is read on its own,
for a city, or for a user.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ourimpact.core.exceptions import NotFoundError, UnauthorizedError
from ourimpact.crud.base import CRUDBase
from ourimpact.models.comment import Comment
from ourimpact.models.like import Like
from ourimpact.models.user import User
from ourimpact.schemas.comment import CommentCreate, CommentUpdate, CommentWithLikes, NewLike
from ourimpact.utils.logging_config import get_logger
from ourimpact.utils.sql import sql_for_partial_update

logger = get_logger(__name__)

# API field name -> column name
COMMENT_UPDATE_FIELDS = {"commentText": "comment_text"}


class CRUDComment(CRUDBase[Comment, CommentCreate, CommentUpdate]):
    """
    CRUD operations for Comment model.
    """

    not_found_message = "Comment not found"

    @staticmethod
    def _select_with_likes():
        """
        Comments joined with their like rows, one result row per comment.

        Ordered by like count descending, then id ascending.
        """
        likes = func.count(Like.id).label("likes")
        return (
            select(
                Comment.id.label("id"),
                Comment.comment_text.label("comment"),
                Comment.username.label("username"),
                Comment.city_name.label("city_name"),
                likes,
            )
            .outerjoin(Like, Like.comment_id == Comment.id)
            .group_by(Comment.id, Comment.comment_text, Comment.username, Comment.city_name)
            .order_by(likes.desc(), Comment.id.asc())
        )

    async def _fetch(self, db: AsyncSession, *criteria) -> List[CommentWithLikes]:
        result = await db.execute(self._select_with_likes().where(*criteria))
        return [CommentWithLikes.model_validate(row._asdict()) for row in result.all()]

    @staticmethod
    async def _ensure_user(db: AsyncSession, username: str) -> None:
        result = await db.execute(select(User.id).where(User.username == username))
        if result.scalars().first() is None:
            raise NotFoundError(f"Username : {username} not found")

    async def get_with_likes(self, db: AsyncSession, id: int) -> CommentWithLikes:
        """
        Get one comment with its like count.

        Raises:
            NotFoundError: If the comment does not exist
        """
        rows = await self._fetch(db, Comment.id == id)
        if not rows:
            raise NotFoundError(f"Comment not found: {id}")
        return rows[0]

    async def get_for_user(self, db: AsyncSession, username: str, id: int) -> CommentWithLikes:
        """
        Get one comment through a user-scoped path.

        The user is checked first, then the comment.
        """
        await self._ensure_user(db, username)
        return await self.get_with_likes(db, id)

    async def list_for_city(self, db: AsyncSession, city_name: str) -> List[CommentWithLikes]:
        return await self._fetch(db, Comment.city_name == city_name)

    async def list_for_user(self, db: AsyncSession, username: str) -> List[CommentWithLikes]:
        """
        All comments written by `username`, most liked first.

        Raises:
            NotFoundError: If the user does not exist
        """
        await self._ensure_user(db, username)
        return await self._fetch(db, Comment.username == username)

    async def count_likes(self, db: AsyncSession, comment_id: int) -> int:
        result = await db.execute(
            select(func.count(Like.id)).where(Like.comment_id == comment_id)
        )
        return int(result.scalar_one())

    async def add_like(self, db: AsyncSession, *, comment_id: int, from_username: str) -> NewLike:
        """
        Record a like from `from_username` on a comment.

        The comment's author is copied onto the like row. The same user can
        like a comment more than once.

        Args:
            db: Database session
            comment_id: Comment being liked
            from_username: User giving the like

        Returns:
            NewLike with the comment's like count after the insert

        Raises:
            NotFoundError: If the comment does not exist
            UnauthorizedError: If `from_username` no longer has an account
        """
        db_comment = await self.get(db, comment_id)
        if db_comment is None:
            raise NotFoundError("Comment id not found")

        result = await db.execute(select(User.id).where(User.username == from_username))
        if result.scalars().first() is None:
            raise UnauthorizedError("Unauthorized")

        db.add(Like(comment_id=comment_id, username=db_comment.username, from_username=from_username))
        await self.commit(db)

        likes = await self.count_likes(db, comment_id)
        logger.info(f"Like added to comment {comment_id} by {from_username} ({likes} total)")
        return NewLike(comment_id=comment_id, likes=likes)

    async def remove_likes(self, db: AsyncSession, *, comment_id: int) -> int:
        """
        Delete every like on a comment, whoever gave it.

        Raises:
            NotFoundError: If the comment has no likes
        """
        result = await db.execute(select(Like.id).where(Like.comment_id == comment_id).limit(1))
        if result.scalars().first() is None:
            raise NotFoundError("Comment id not found")

        await db.execute(delete(Like).where(Like.comment_id == comment_id))
        await db.commit()
        return comment_id

    def _owned(self, id: int, author: Optional[str]) -> list:
        criteria = [Comment.id == id]
        if author is not None:
            criteria.append(Comment.username == author)
        return criteria

    async def update(
        self,
        db: AsyncSession,
        *,
        id: int,
        data: Dict[str, Any],
        author: Optional[str] = None,
    ) -> str:
        """
        Change the text of a comment.

        Args:
            db: Database session
            id: Comment ID
            data: Fields to change, keyed by API name ({"commentText": ...})
            author: When given, the comment must have been written by this user

        Returns:
            The updated comment text

        Raises:
            BadRequestError: If `data` is empty or names another field
            NotFoundError: If no matching comment exists
        """
        partial = sql_for_partial_update(data, COMMENT_UPDATE_FIELDS)

        table = Comment.__table__
        result = await db.execute(
            update(table)
            .where(*self._owned(id, author))
            .values(partial.as_values())
            .returning(table.c.comment_text)
        )
        updated_text = result.scalar_one_or_none()
        if updated_text is None:
            await db.rollback()
            raise NotFoundError(f"Comment not found: {id}")

        await db.commit()
        return updated_text

    async def remove(
        self,
        db: AsyncSession,
        *,
        id: int,
        author: Optional[str] = None,
    ) -> int:
        """
        Delete a comment together with its likes.

        Raises:
            NotFoundError: If no matching comment exists
        """
        result = await db.execute(select(Comment.id).where(*self._owned(id, author)))
        if result.scalars().first() is None:
            raise NotFoundError(f"Comment not found: {id}")

        await db.execute(delete(Like).where(Like.comment_id == id))
        await db.execute(delete(Comment).where(Comment.id == id))
        await db.commit()
        logger.info(f"Comment {id} deleted")
        return id


# Create instance of CRUDComment
comment = CRUDComment(Comment)
