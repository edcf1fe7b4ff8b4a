"""
Comment database model.

A comment's like count is never stored here; it is always computed
by counting the rows in `likes` that reference the comment.
"""

from sqlalchemy import Column, ForeignKey, Index, String, Text

from ourimpact.models.base import BaseModel


class Comment(BaseModel):
    """Free-text comment written by a user about a city."""

    __tablename__ = "comments"

    comment_text = Column(Text, nullable=False)
    username = Column(
        String(50),
        ForeignKey("users.username", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Author",
    )
    city_name = Column(
        String(100),
        ForeignKey("cities.name", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        Index("idx_comment_city_username", "city_name", "username"),
    )

    def __repr__(self):
        return f"<Comment(id={self.id}, username='{self.username}', city_name='{self.city_name}')>"
