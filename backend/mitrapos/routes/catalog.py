"""
Mitra POS Backend — Catalog Routes
====================================

Route Inventory:
    /api/produk        products (read by the transaction endpoints)
    /api/kategori      categories
    /api/subkategori   subcategories
    /api/suppliers     suppliers (table `supplier`)
"""

from mitrapos.routes.crud import build_crud_router
from mitrapos.schemas.catalog import (
    KategoriPayload,
    KategoriResponse,
    ProdukPayload,
    ProdukResponse,
    SubkategoriPayload,
    SubkategoriResponse,
    SupplierPayload,
    SupplierResponse,
)
from mitrapos.services.crud_service import (
    kategori_service,
    produk_service,
    subkategori_service,
    supplier_service,
)

produk_router = build_crud_router(
    path="produk",
    tag="Produk",
    service=produk_service,
    create_schema=ProdukPayload,
    update_schema=ProdukPayload,
    response_schema=ProdukResponse,
)

kategori_router = build_crud_router(
    path="kategori",
    tag="Kategori",
    service=kategori_service,
    create_schema=KategoriPayload,
    update_schema=KategoriPayload,
    response_schema=KategoriResponse,
)

subkategori_router = build_crud_router(
    path="subkategori",
    tag="Subkategori",
    service=subkategori_service,
    create_schema=SubkategoriPayload,
    update_schema=SubkategoriPayload,
    response_schema=SubkategoriResponse,
)

supplier_router = build_crud_router(
    path="suppliers",
    tag="Suppliers",
    service=supplier_service,
    create_schema=SupplierPayload,
    update_schema=SupplierPayload,
    response_schema=SupplierResponse,
)

routers = [produk_router, kategori_router, subkategori_router, supplier_router]
