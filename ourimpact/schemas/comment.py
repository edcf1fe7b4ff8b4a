"""
Comment schemas.

Every comment read carries `likes`, the number of like rows that
reference it at the time of the read.
"""

from typing import List, Optional

from pydantic import ConfigDict, Field

from ourimpact.schemas.base import BaseSchema


class CommentWithLikes(BaseSchema):
    """Comment as returned by every read path."""
    id: int
    comment: str
    username: str
    city_name: str
    likes: int = 0


class CommentCreate(BaseSchema):
    """
    Body of a new comment.

    `author` must be the caller unless the caller is an admin;
    `location_name` defaults to the city in the path.
    """
    comment_text: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)
    location_name: Optional[str] = None


class CommentUpdate(BaseSchema):
    """Only the text of a comment can change."""
    model_config = ConfigDict(extra="forbid")

    comment_text: Optional[str] = Field(default=None, min_length=1)


class NewLike(BaseSchema):
    comment_id: int
    likes: int


class CommentResponse(BaseSchema):
    comment: CommentWithLikes


class CommentList(BaseSchema):
    comments: List[CommentWithLikes]


class NewLikeResponse(BaseSchema):
    new_like: NewLike


class RemovedLikeResponse(BaseSchema):
    removed_like: int


class CommentUpdatedResponse(BaseSchema):
    updated: str


class CommentDeletedResponse(BaseSchema):
    deleted: int
