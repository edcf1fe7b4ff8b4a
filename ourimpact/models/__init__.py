# Database models package

from ourimpact.models.base import BaseModel
from ourimpact.models.city import City
from ourimpact.models.user import User
from ourimpact.models.comment import Comment
from ourimpact.models.like import Like
from ourimpact.models.resource import Resource
from ourimpact.models.temp_reading import TempReading

__all__ = [
    "BaseModel",
    "City",
    "User",
    "Comment",
    "Like",
    "Resource",
    "TempReading",
]
