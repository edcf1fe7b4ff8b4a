"""
Resource CRUD operations.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ourimpact.crud.base import CRUDBase
from ourimpact.models.resource import Resource
from ourimpact.schemas.resource import ResourceCreate, ResourceReplace


class CRUDResource(CRUDBase[Resource, ResourceCreate, ResourceReplace]):
    """
    CRUD operations for Resource model.

    Listings are filtered by `content_type`; updates replace all four
    fields at once.
    """

    async def get_by_type(self, db: AsyncSession, content_type: str) -> List[Resource]:
        result = await db.execute(
            select(Resource).where(Resource.content_type == content_type).order_by(Resource.id)
        )
        return list(result.scalars().all())

    async def get_articles(self, db: AsyncSession) -> List[Resource]:
        return await self.get_by_type(db, "Article")

    async def get_videos(self, db: AsyncSession) -> List[Resource]:
        return await self.get_by_type(db, "Video")

    async def get_landing_pages(self, db: AsyncSession) -> List[Resource]:
        return await self.get_by_type(db, "Landing Page")

    async def replace(self, db: AsyncSession, *, id: int, obj_in: ResourceReplace) -> Resource:
        """
        Overwrite every field of a resource.

        Args:
            db: Database session
            id: Resource ID
            obj_in: New title, url, type and rating

        Returns:
            Updated resource

        Raises:
            NotFoundError: If no resource has this ID
        """
        db_obj = await self.get_or_404(db, id)
        for field, value in obj_in.model_dump().items():
            setattr(db_obj, field, value)
        await self.commit(db)
        await db.refresh(db_obj)
        return db_obj


# Create instance of CRUDResource
resource = CRUDResource(Resource)
