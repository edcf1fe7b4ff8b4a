"""
Learning resource database model.
"""

from sqlalchemy import Column, String, Text

from ourimpact.models.base import BaseModel


class Resource(BaseModel):
    """
    A curated link shown in the resources section.

    `content_type` is "Article", "Video" or "Landing Page"; `rating` is a free-text
    audience tag such as PG, PG-13 or MATURE.
    """

    __tablename__ = "resources"

    content_title = Column(String(255), nullable=False)
    content_url = Column(Text, nullable=False)
    content_type = Column(String(20), nullable=False, index=True)
    rating = Column(String(20), nullable=False)

    def __repr__(self):
        return f"<Resource(id={self.id}, content_type='{self.content_type}', title='{self.content_title}')>"
