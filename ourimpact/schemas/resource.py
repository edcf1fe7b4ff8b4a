"""
Learning resource schemas.
"""

from typing import List, Literal

from pydantic import Field

from ourimpact.schemas.base import BaseSchema, IDSchema

ContentType = Literal["Article", "Video", "Landing Page"]


class ResourceBase(BaseSchema):
    content_title: str = Field(..., min_length=1, max_length=255)
    content_url: str = Field(..., min_length=1)
    content_type: ContentType
    rating: str = Field(..., min_length=1, max_length=20)


class ResourceCreate(ResourceBase):
    """Schema for adding a resource."""
    pass


class ResourceReplace(ResourceBase):
    """Updates replace the whole row, so every field is required."""
    pass


class Resource(ResourceBase, IDSchema):
    pass


class ResourceList(BaseSchema):
    resources: List[Resource]


class ArticleList(BaseSchema):
    articles: List[Resource]


class VideoList(BaseSchema):
    videos: List[Resource]


class LandingPageList(BaseSchema):
    landing_pages: List[Resource]


class ResourceResponse(BaseSchema):
    resource: Resource


class ResourceAddedResponse(BaseSchema):
    added: Resource


class ResourceUpdatedResponse(BaseSchema):
    updated: Resource


class ResourceDeletedResponse(BaseSchema):
    deleted: int
