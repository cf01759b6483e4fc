"""
Mitra POS Backend — Transaksi Route Handlers
==============================================

What:  Checkout and transaction history endpoints.
How:   Thin handlers; TransaksiService does the enrichment and joins.

Route Inventory:
    POST   /api/transaksi                 checkout (enrich + insert)
    GET    /api/transaksi                 all transactions with `produk`
    GET    /api/transaksi/{id_pemesan}    a customer's first transaction
    PUT    /api/transaksi/{id_pemesan}    payment / serving / table update
    DELETE /api/transaksi/{transaksi_id}  delete by primary id ([] if none)

Note the asymmetry: GET and PUT address a *customer* id, DELETE addresses
the transaction's own id. Existing clients depend on these paths.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mitrapos.database import get_db_session
from mitrapos.schemas.common import DataResponse, ErrorResponse
from mitrapos.schemas.transaksi import (
    TransaksiCreate,
    TransaksiDetail,
    TransaksiResponse,
    TransaksiUpdate,
)
from mitrapos.services.transaksi_service import transaksi_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Transaksi"])


@router.post(
    "/transaksi",
    status_code=201,
    response_model=DataResponse[TransaksiResponse],
    responses={
        400: {"description": "pesanan missing, empty or not an array", "model": ErrorResponse},
        500: {"description": "Unknown product in pesanan, or server error", "model": ErrorResponse},
    },
    summary="Create a transaksi",
    description=(
        "Resolves every product id in `pesanan` to its current name and sale price, "
        "stores the resulting order lines (qty=1 each) with the transaction, and returns "
        "the created row. If any product id does not exist nothing is stored."
    ),
)
async def create_transaksi(
    payload: TransaksiCreate,
    db: AsyncSession = Depends(get_db_session),
) -> DataResponse[TransaksiResponse]:
    logger.info(
        "Received checkout: pemesan=%s, %d items",
        payload.id_pemesan,
        len(payload.pesanan),
    )
    return DataResponse(data=await transaksi_service.create_transaksi(db, payload))


@router.get(
    "/transaksi",
    response_model=DataResponse[List[TransaksiDetail]],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Retrieve all transaksi with detailed produk",
)
async def list_transaksi(
    db: AsyncSession = Depends(get_db_session),
) -> DataResponse[List[TransaksiDetail]]:
    return DataResponse(data=await transaksi_service.list_transaksi(db))


@router.get(
    "/transaksi/{id_pemesan}",
    response_model=DataResponse[TransaksiDetail],
    responses={
        404: {"description": "Customer has no transactions", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Retrieve a customer's transaksi with detailed produk",
    description="Returns the first transaction recorded for `id_pemesan`.",
)
async def get_transaksi(
    id_pemesan: str,
    db: AsyncSession = Depends(get_db_session),
) -> DataResponse[TransaksiDetail]:
    return DataResponse(data=await transaksi_service.get_transaksi_by_pemesan(db, id_pemesan))


@router.put(
    "/transaksi/{id_pemesan}",
    response_model=DataResponse[List[TransaksiResponse]],
    responses={
        404: {"description": "Customer has no transactions", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Update payment status, serving mode, table or payment method",
)
async def update_transaksi(
    id_pemesan: str,
    payload: TransaksiUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> DataResponse[List[TransaksiResponse]]:
    rows = await transaksi_service.update_transaksi_by_pemesan(db, id_pemesan, payload)
    return DataResponse(data=rows)


@router.delete(
    "/transaksi/{transaksi_id}",
    response_model=DataResponse[List[TransaksiResponse]],
    responses={
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a transaksi by ID",
)
async def delete_transaksi(
    transaksi_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> DataResponse[List[TransaksiResponse]]:
    return DataResponse(data=await transaksi_service.delete_transaksi(db, transaksi_id))
