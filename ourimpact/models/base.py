"""
Abstract parent of every table: surrogate `id` plus server-side
`created_at` / `updated_at` timestamps. `temp_data` orders on `created_at`.
"""

from sqlalchemy import Column, DateTime, Integer, func
from sqlalchemy.orm import declared_attr

from ourimpact.database import Base


def _timestamp_column(**kwargs) -> Column:
    return Column(DateTime(timezone=True), server_default=func.now(), nullable=False, **kwargs)


class BaseModel(Base):
    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    @declared_attr
    def created_at(cls):
        return _timestamp_column()

    @declared_attr
    def updated_at(cls):
        return _timestamp_column(onupdate=func.now())
