"""
Like schemas (read-only projections).
"""

from typing import List

from ourimpact.schemas.base import BaseSchema, IDSchema


class Like(IDSchema):
    comment_id: int
    username: str
    from_username: str


class AllLikesResponse(BaseSchema):
    all_likes: List[Like]


class UserLikesResponse(BaseSchema):
    user_likes: List[Like]
