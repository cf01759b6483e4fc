"""
Mitra POS Backend — CRUD Router Factory
=========================================

What:  Builds the five uniform endpoints for a single-table resource:

    GET    /api/{path}          list every row
    GET    /api/{path}/{id}     rows with that id ([] if none)
    POST   /api/{path}          create → 201
    PUT    /api/{path}/{id}     partial update, returns the updated rows
    DELETE /api/{path}/{id}     delete and return the removed rows

Why a factory: seven resources share this exact shape. Each call site in
routes/catalog.py and routes/partners.py states only
what differs (path, tag, service, schemas).
"""

from typing import Type

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from mitrapos.database import get_db_session
from mitrapos.schemas.common import DataResponse, ErrorResponse
from mitrapos.services.crud_service import CrudService

_ERRORS = {
    400: {"description": "Invalid input", "model": ErrorResponse},
    500: {"description": "Server error", "model": ErrorResponse},
}


def build_crud_router(
    *,
    path: str,
    tag: str,
    service: CrudService,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    response_schema: Type[BaseModel],
) -> APIRouter:
    """Return an APIRouter (prefix /api) exposing CRUD for one resource."""
    router = APIRouter(prefix="/api", tags=[tag])
    resource = service.resource

    def _one(entity) -> DataResponse:
        return DataResponse(data=response_schema.model_validate(entity))

    def _many(rows) -> DataResponse:
        return DataResponse(data=[response_schema.model_validate(row) for row in rows])

    @router.get(
        f"/{path}",
        response_model=DataResponse[list[response_schema]],
        responses=_ERRORS,
        summary=f"List all {resource}",
    )
    async def list_items(db: AsyncSession = Depends(get_db_session)):
        return _many(await service.list_all(db))

    @router.get(
        f"/{path}/{{item_id}}",
        response_model=DataResponse[list[response_schema]],
        responses=_ERRORS,
        summary=f"Get one {resource} by ID",
    )
    async def get_item(item_id: int, db: AsyncSession = Depends(get_db_session)):
        return _many(await service.find(db, item_id))

    @router.post(
        f"/{path}",
        status_code=201,
        response_model=DataResponse[response_schema],
        responses=_ERRORS,
        summary=f"Create a {resource}",
    )
    async def create_item(payload: create_schema, db: AsyncSession = Depends(get_db_session)):
        return _one(await service.create(db, payload.model_dump()))

    @router.put(
        f"/{path}/{{item_id}}",
        response_model=DataResponse[list[response_schema]],
        responses=_ERRORS,
        summary=f"Update a {resource}",
    )
    async def update_item(
        item_id: int,
        payload: update_schema,
        db: AsyncSession = Depends(get_db_session),
    ):
        return _many(await service.update(db, item_id, payload.model_dump(exclude_unset=True)))

    @router.delete(
        f"/{path}/{{item_id}}",
        response_model=DataResponse[list[response_schema]],
        responses=_ERRORS,
        summary=f"Delete a {resource}",
    )
    async def delete_item(item_id: int, db: AsyncSession = Depends(get_db_session)):
        return _many(await service.delete(db, item_id))

    return router
