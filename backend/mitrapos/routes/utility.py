"""
Mitra POS Backend — Login & QR Code Routes
============================================

Route Inventory:
    POST /api/login    username/password → {token, user}
    POST /api/qrcode   text → PNG data URL
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from mitrapos.database import get_db_session
from mitrapos.schemas.common import DataResponse, ErrorResponse
from mitrapos.schemas.utility import LoginRequest, LoginResult, QrCodeRequest, QrCodeResult
from mitrapos.services.auth_service import auth_service
from mitrapos.services.qrcode_service import qrcode_service

router = APIRouter(prefix="/api")


@router.post(
    "/login",
    tags=["Auth"],
    response_model=DataResponse[LoginResult],
    responses={
        400: {"description": "username or password missing", "model": ErrorResponse},
        401: {"description": "Invalid username or password", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="User login",
)
async def login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
) -> DataResponse[LoginResult]:
    return DataResponse(data=await auth_service.login(db, payload.username, payload.password))


@router.post(
    "/qrcode",
    tags=["QRCode"],
    response_model=DataResponse[QrCodeResult],
    responses={400: {"description": "qrcode missing or empty", "model": ErrorResponse}},
    summary="Generate a QR Code",
)
async def generate_qrcode(payload: QrCodeRequest) -> DataResponse[QrCodeResult]:
    data_url = await run_in_threadpool(qrcode_service.generate_data_url, payload.qrcode)
    return DataResponse(data=QrCodeResult(base64=data_url))
