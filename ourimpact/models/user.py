"""
User database model.

This module contains the User model for account registration and login.
"""

from sqlalchemy import Boolean, Column, ForeignKey, String, false

from ourimpact.models.base import BaseModel


class User(BaseModel):
    """
    Registered user.

    `username` is the natural key referenced by comments and likes.
    The password is only ever stored as a bcrypt hash.
    """

    __tablename__ = "users"

    username = Column(String(50), unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    user_city = Column(
        "city_name",
        String(100),
        ForeignKey("cities.name", ondelete="SET NULL"),
        nullable=True,
        comment="Home city",
    )
    is_admin = Column(Boolean, nullable=False, default=False, server_default=false())

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}', is_admin={self.is_admin})>"
