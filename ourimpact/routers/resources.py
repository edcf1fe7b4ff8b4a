"""
Resources router.

Anyone can read the catalog; only admins can change it.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ourimpact.crud.resource import resource as crud_resource
from ourimpact.database import get_db
from ourimpact.dependencies.auth import Identity, require_admin
from ourimpact.schemas.resource import (
    ArticleList,
    LandingPageList,
    Resource,
    ResourceAddedResponse,
    ResourceCreate,
    ResourceDeletedResponse,
    ResourceList,
    ResourceReplace,
    ResourceResponse,
    ResourceUpdatedResponse,
    VideoList,
)

router = APIRouter(
    prefix="/resources",
    tags=["resources"],
    responses={404: {"description": "Not found"}},
)


def _many(db_resources):
    return [Resource.model_validate(r) for r in db_resources]


@router.get("", response_model=ResourceList)
async def list_resources(db: AsyncSession = Depends(get_db)):
    return ResourceList(resources=_many(await crud_resource.get_all(db)))


@router.get("/articles", response_model=ArticleList)
async def list_articles(db: AsyncSession = Depends(get_db)):
    return ArticleList(articles=_many(await crud_resource.get_articles(db)))


@router.get("/videos", response_model=VideoList)
async def list_videos(db: AsyncSession = Depends(get_db)):
    return VideoList(videos=_many(await crud_resource.get_videos(db)))


@router.get("/additional-resources", response_model=LandingPageList)
async def list_landing_pages(db: AsyncSession = Depends(get_db)):
    return LandingPageList(landing_pages=_many(await crud_resource.get_landing_pages(db)))


@router.post("", response_model=ResourceAddedResponse, status_code=status.HTTP_201_CREATED)
async def add_resource(
    resource_in: ResourceCreate,
    admin: Identity = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    db_resource = await crud_resource.create(db, obj_in=resource_in)
    return ResourceAddedResponse(added=Resource.model_validate(db_resource))


@router.patch("/{resource_id}", response_model=ResourceUpdatedResponse)
async def replace_resource(
    resource_id: int,
    resource_in: ResourceReplace,
    admin: Identity = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Replace every field of a resource; all four are required."""
    db_resource = await crud_resource.replace(db, id=resource_id, obj_in=resource_in)
    return ResourceUpdatedResponse(updated=Resource.model_validate(db_resource))


@router.delete("/{resource_id}", response_model=ResourceDeletedResponse)
async def delete_resource(
    resource_id: int,
    admin: Identity = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    await crud_resource.remove(db, id=resource_id)
    return ResourceDeletedResponse(deleted=resource_id)


@router.get("/{resource_id}", response_model=ResourceResponse)
async def get_resource(resource_id: int, db: AsyncSession = Depends(get_db)):
    return ResourceResponse(resource=Resource.model_validate(await crud_resource.get_or_404(db, resource_id)))
