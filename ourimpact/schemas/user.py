"""
User and authentication schemas.

Passwords are accepted on input only; no response schema carries one.
"""

from typing import List, Optional

from pydantic import ConfigDict, EmailStr, Field

from ourimpact.schemas.base import BaseSchema
from ourimpact.schemas.comment import CommentWithLikes


class UserLogin(BaseSchema):
    """Credentials for POST /auth/token."""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserCreate(BaseSchema):
    """Schema for registering a new user."""
    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=5)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    user_city: Optional[str] = None


class UserUpdate(BaseSchema):
    """
    Schema for partial user updates.

    Username and admin flag are immutable through this path.
    """
    model_config = ConfigDict(extra="forbid")

    first_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    user_city: Optional[str] = None
    password: Optional[str] = Field(default=None, min_length=5)


class UserProfile(BaseSchema):
    """Public profile."""
    username: str
    first_name: str
    last_name: str
    email: str
    user_city: Optional[str] = None
    is_admin: bool = False


class UserWithComments(UserProfile):
    comments: List[CommentWithLikes] = []


class TokenResponse(BaseSchema):
    token: str


class UserResponse(BaseSchema):
    user: UserProfile


class UserDetailResponse(BaseSchema):
    user: UserWithComments


class UserList(BaseSchema):
    users: List[UserProfile]


class AdminList(BaseSchema):
    admins: List[UserProfile]


class UserDeletedResponse(BaseSchema):
    deleted: str
