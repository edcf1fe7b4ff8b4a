"""
City database model.

Cities are seeded once and are the anchor for comments, user home cities
and the scheduled weather readings.
"""

from sqlalchemy import Column, Float, String

from ourimpact.models.base import BaseModel


class City(BaseModel):
    """
    A city users can comment on.

    `name` is the natural key ("Paris", "New Orleans") referenced by
    comments and users.
    """

    __tablename__ = "cities"

    name = Column(String(100), unique=True, index=True, nullable=False, comment="City name (natural key)")
    country_code = Column(String(2), nullable=False, comment="ISO 3166-1 alpha-2 country code")
    latitude = Column(Float, nullable=False, comment="Latitude in degrees")
    longitude = Column(Float, nullable=False, comment="Longitude in degrees")

    def __repr__(self):
        return f"<City(id={self.id}, name='{self.name}', country_code='{self.country_code}')>"
