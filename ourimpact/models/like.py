"""
Like database model.

One row per "like" a user gave to a comment. The same user may like the
same comment more than once; nothing here deduplicates.
"""

from sqlalchemy import Column, ForeignKey, Integer, String

from ourimpact.models.base import BaseModel


class Like(BaseModel):
    """A like on a comment."""

    __tablename__ = "likes"

    comment_id = Column(
        Integer,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Author of the liked comment, copied when the like is created
    username = Column(
        String(50),
        ForeignKey("users.username", ondelete="CASCADE"),
        nullable=False,
    )
    from_username = Column(
        String(50),
        ForeignKey("users.username", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self):
        return f"<Like(id={self.id}, comment_id={self.comment_id}, from_username='{self.from_username}')>"
