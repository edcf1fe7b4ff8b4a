"""
Temperature / air-quality reading database model.

Rows are appended by the scheduled weather job only. `created_at`
is the insertion timestamp used to find the latest readings.
"""

from sqlalchemy import Column, Float, Index, Integer, String

from ourimpact.models.base import BaseModel


class TempReading(BaseModel):
    """Weather snapshot for a single city, temperatures rounded to 2 decimals."""

    __tablename__ = "temp_data"

    city = Column(String(100), nullable=False, index=True, comment="City name")
    curr_temp_cel = Column(Float, nullable=False)
    curr_temp_far = Column(Float, nullable=False)
    min_temp_cel = Column(Float, nullable=False)
    max_temp_cel = Column(Float, nullable=False)
    min_temp_far = Column(Float, nullable=False)
    max_temp_far = Column(Float, nullable=False)
    air_quality = Column(Integer, nullable=True, comment="OpenWeather AQI (1-5)")

    __table_args__ = (
        Index("idx_temp_data_created_at", "created_at"),
    )

    def __repr__(self):
        return f"<TempReading(id={self.id}, city='{self.city}', curr_temp_cel={self.curr_temp_cel})>"
