"""
Base CRUD operations.

This module contains base CRUD (Create, Read, Update, Delete) operations
that can be inherited by specific model CRUD classes. Methods that write
commit their own transaction, so a check followed by a write is one unit.
"""

from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ourimpact.core.exceptions import BadRequestError, NotFoundError
from ourimpact.database import Base
from ourimpact.utils.logging_config import get_logger

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Base CRUD operations class.

    Provides generic CRUD operations that can be used by specific model CRUD classes.
    """

    not_found_message = "Id not found"

    def __init__(self, model: Type[ModelType]):
        """
        Initialize CRUD operations for a specific model.

        Args:
            model: The SQLAlchemy model class
        """
        self.model = model

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        Get a single record by ID.

        Args:
            db: Database session
            id: Record ID

        Returns:
            Model instance or None if not found
        """
        result = await db.execute(select(self.model).where(self.model.id == id))
        return result.scalars().first()

    async def get_or_404(self, db: AsyncSession, id: Any) -> ModelType:
        """
        Get a single record by ID.

        Raises:
            NotFoundError: If no record has this ID
        """
        db_obj = await self.get(db, id)
        if db_obj is None:
            raise NotFoundError(self.not_found_message)
        return db_obj

    async def get_all(self, db: AsyncSession) -> List[ModelType]:
        """
        Get every record, ordered by ID.

        Args:
            db: Database session

        Returns:
            List of model instances
        """
        result = await db.execute(select(self.model).order_by(self.model.id))
        return list(result.scalars().all())

    async def create(self, db: AsyncSession, *, obj_in: CreateSchemaType) -> ModelType:
        """
        Create a new record.

        Args:
            db: Database session
            obj_in: Input data schema

        Returns:
            Created model instance

        Raises:
            BadRequestError: If the store rejects the row
        """
        db_obj = self.model(**obj_in.model_dump())
        db.add(db_obj)
        await self.commit(db)
        await db.refresh(db_obj)
        return db_obj

    async def remove(self, db: AsyncSession, *, id: int) -> ModelType:
        """
        Remove a record by ID.

        Args:
            db: Database session
            id: Record ID to remove

        Returns:
            Removed model instance

        Raises:
            NotFoundError: If no record has this ID
        """
        db_obj = await self.get_or_404(db, id)
        await db.delete(db_obj)
        await db.commit()
        return db_obj

    @staticmethod
    async def commit(db: AsyncSession) -> None:
        """Commit, turning constraint violations into BadRequestError."""
        try:
            await db.commit()
        except IntegrityError as exc:
            await db.rollback()
            logger.warning(f"Constraint violation: {exc.orig}")
            raise BadRequestError("Constraint violation") from exc
