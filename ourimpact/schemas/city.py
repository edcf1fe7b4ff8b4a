"""
City schemas.
"""

from typing import List

from ourimpact.schemas.base import BaseSchema
from ourimpact.schemas.comment import CommentWithLikes


class City(BaseSchema):
    """City summary."""
    name: str
    country_code: str
    latitude: float
    longitude: float


class CityWithComments(City):
    """City plus its comments, most liked first."""
    comments: List[CommentWithLikes] = []


class CityList(BaseSchema):
    cities: List[City]


class CityResponse(BaseSchema):
    city: City


class CityDataResponse(BaseSchema):
    city_data: CityWithComments
