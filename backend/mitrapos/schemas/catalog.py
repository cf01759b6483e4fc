"""
Mitra POS Backend — Catalog Request/Response Schemas
=====================================================

Create and update bodies share one field set per entity. Every field is
optional: the catalog accepts partial records, and updates only touch the
fields the client actually sent (`model_dump(exclude_unset=True)`).
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Produk
# ══════════════════════════════════════════════════════════════════════════


class ProdukPayload(BaseModel):
    """Body of POST /api/produk and PUT /api/produk/{id}."""
    namaproduk: Optional[str] = Field(default=None, description="Product name", examples=["Kopi Hitam"])
    kategori: Optional[str] = Field(default=None, description="Category label")
    subkategori: Optional[str] = Field(default=None, description="Subcategory label")
    supplier: Optional[str] = Field(default=None, description="Supplier reference")
    jmlstok: Optional[int] = Field(default=None, ge=0, description="Units in stock")
    fotoproduk: Optional[str] = Field(default=None, description="Image URL or storage key")
    hargajual: Optional[float] = Field(default=None, ge=0, description="Sale price", examples=[15000])
    hargamodal: Optional[float] = Field(default=None, ge=0, description="Cost price")


class ProdukResponse(ProdukPayload):
    """
    A stored product.

    Numeric fields carry no bounds here: stock goes negative after overselling,
    and reads must return whatever the catalog holds.
    """
    id: int = Field(description="Product identifier")
    jmlstok: Optional[int] = Field(default=None, description="Units in stock")
    hargajual: Optional[float] = Field(default=None, description="Sale price")
    hargamodal: Optional[float] = Field(default=None, description="Cost price")

    model_config = {"from_attributes": True}


# ══════════════════════════════════════════════════════════════════════════
# Taxonomy: kategori, subkategori, supplier
# ══════════════════════════════════════════════════════════════════════════


class KategoriPayload(BaseModel):
    nama_kategori: Optional[str] = Field(default=None, examples=["Minuman"])


class KategoriResponse(KategoriPayload):
    id: int

    model_config = {"from_attributes": True}


class SubkategoriPayload(BaseModel):
    nama_subkategori: Optional[str] = Field(default=None, examples=["Kopi"])


class SubkategoriResponse(SubkategoriPayload):
    id: int

    model_config = {"from_attributes": True}


class SupplierPayload(BaseModel):
    nama_supplier: Optional[str] = Field(default=None, examples=["CV Sumber Rejeki"])


class SupplierResponse(SupplierPayload):
    id: int

    model_config = {"from_attributes": True}
