"""
Mitra POS Backend — Partner, User & Submission Routes
=======================================================

Route Inventory:
    /api/mitra       partners
    /api/users       login accounts (password is write-only)
    /api/pengajuan   stock submissions (only approval fields are updatable)
"""

from mitrapos.routes.crud import build_crud_router
from mitrapos.schemas.partner import (
    MitraPayload,
    MitraResponse,
    UserCreate,
    UserResponse,
    UserUpdate,
)
from mitrapos.schemas.pengajuan import PengajuanCreate, PengajuanResponse, PengajuanUpdate
from mitrapos.services.crud_service import mitra_service, pengajuan_service, user_service

mitra_router = build_crud_router(
    path="mitra",
    tag="Mitra",
    service=mitra_service,
    create_schema=MitraPayload,
    update_schema=MitraPayload,
    response_schema=MitraResponse,
)

user_router = build_crud_router(
    path="users",
    tag="Users",
    service=user_service,
    create_schema=UserCreate,
    update_schema=UserUpdate,
    response_schema=UserResponse,
)

pengajuan_router = build_crud_router(
    path="pengajuan",
    tag="Pengajuan",
    service=pengajuan_service,
    create_schema=PengajuanCreate,
    update_schema=PengajuanUpdate,
    response_schema=PengajuanResponse,
)

routers = [mitra_router, user_router, pengajuan_router]
