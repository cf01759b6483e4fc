"""
Mitra POS Backend — Generic CRUD Service
==========================================

What:  Single-table create/read/update/delete for the uniform entities:
       produk, kategori, subkategori, supplier, mitra, users, pengajuan.
Why:   These resources share one behaviour: one query per request and no
       joins. One class keeps them consistent.
How:   One CrudService instance per model (bottom of this module); routes
       built by routes.crud.build_crud_router call into it.

By-id semantics:
    GET, PUT and DELETE by id behave as filters on the primary key: they
    return the matching rows as a list, which is empty when the id does not
    exist. A missing id is not an error.

Update semantics:
    Callers pass `payload.model_dump(exclude_unset=True)`, so a PUT only
    writes the fields present in the body. Omitted fields keep their value.
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mitrapos.database import Base
from mitrapos.exceptions import DatabaseError, ValidationError
from mitrapos.models import Kategori, Mitra, Pengajuan, Produk, Subkategori, Supplier, User

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class CrudService(Generic[ModelT]):
    """
    Stateless CRUD operations for one mapped model.

    Args:
        model:    The SQLAlchemy model class
        resource: Name used in log lines and error messages
    """

    def __init__(self, model: Type[ModelT], resource: str):
        self.model = model
        self.resource = resource

    async def list_all(self, db: AsyncSession) -> List[ModelT]:
        try:
            result = await db.execute(select(self.model).order_by(self.model.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing %s: %s", self.resource, str(e), exc_info=True)
            raise DatabaseError(
                message=f"Could not retrieve {self.resource}. Please try again.",
                context={"resource": self.resource, "error_type": type(e).__name__},
            )

    async def find(self, db: AsyncSession, entity_id: int) -> List[ModelT]:
        """Rows whose primary key is `entity_id`: one, or none."""
        entity = await self._get(db, entity_id)
        return [entity] if entity is not None else []

    async def create(self, db: AsyncSession, values: Dict[str, Any]) -> ModelT:
        entity = self.model(**values)
        db.add(entity)
        await self._flush(db, "creating")
        logger.info("%s %s created", self.resource, entity.id)
        return entity

    async def update(
        self, db: AsyncSession, entity_id: int, values: Dict[str, Any]
    ) -> List[ModelT]:
        entity = await self._get(db, entity_id)
        if entity is None:
            logger.info("%s %s not found; nothing updated", self.resource, entity_id)
            return []
        for field, value in values.items():
            setattr(entity, field, value)
        await self._flush(db, "updating")
        logger.info("%s %s updated: %s", self.resource, entity_id, sorted(values))
        return [entity]

    async def delete(self, db: AsyncSession, entity_id: int) -> List[ModelT]:
        """Delete the row with `entity_id` and return what was removed."""
        entity = await self._get(db, entity_id)
        if entity is None:
            logger.info("%s %s not found; nothing deleted", self.resource, entity_id)
            return []
        await db.delete(entity)
        await self._flush(db, "deleting")
        logger.info("%s %s deleted", self.resource, entity_id)
        return [entity]

    async def _get(self, db: AsyncSession, entity_id: int) -> Optional[ModelT]:
        try:
            return await db.get(self.model, entity_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching %s %s: %s", self.resource, entity_id, str(e))
            raise DatabaseError(
                message=f"Could not retrieve {self.resource}. Please try again.",
                context={"resource": self.resource, "id": entity_id},
            )

    async def _flush(self, db: AsyncSession, action: str) -> None:
        try:
            await db.flush()
        except IntegrityError as e:
            # Unique/not-null violations are the client's to fix
            logger.warning("Integrity error %s %s: %s", action, self.resource, str(e.orig))
            raise ValidationError(
                message=f"The {self.resource} record conflicts with existing data or is incomplete",
                context={"resource": self.resource},
            )
        except SQLAlchemyError as e:
            logger.error("Database error %s %s: %s", action, self.resource, str(e), exc_info=True)
            raise DatabaseError(
                context={"resource": self.resource, "error_type": type(e).__name__},
            )


# ── Service Instances ─────────────────────────────────────────────────────
produk_service = CrudService(Produk, "produk")
kategori_service = CrudService(Kategori, "kategori")
subkategori_service = CrudService(Subkategori, "subkategori")
supplier_service = CrudService(Supplier, "supplier")
mitra_service = CrudService(Mitra, "mitra")
user_service = CrudService(User, "user")
pengajuan_service = CrudService(Pengajuan, "pengajuan")
