"""
Mitra POS Backend — Transaksi Request/Response Schemas
========================================================

What:  API contract for the transaction endpoints.

Shapes:
    POST body      TransaksiCreate: `pesanan` is a list of product ids
    Stored lines   OrderLine: what the enricher writes into `pesanan`
    Read result    TransaksiDetail: the row plus the resolved `produk` list

`pesanan` is stored as JSON text. TransaksiResponse decodes it back into a
list so clients always receive structured data; text that is not a JSON
array (hand-edited or legacy rows) reads as an empty list.
"""

import json
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field, StrictInt, field_validator

from mitrapos.schemas.catalog import ProdukResponse


def load_pesanan(raw: Any) -> Optional[List[Any]]:
    """
    Decode a stored `pesanan` value into a list.

    Returns [] for empty values and None when the value is not a JSON array,
    so callers can decide whether to report the bad row.
    """
    if raw is None or raw == "":
        return []
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError:
            return None
    return raw if isinstance(raw, list) else None


class OrderLine(BaseModel):
    """
    One enriched order line.

    Names and prices are copied from the catalog at checkout, so a stored
    transaction keeps the values that were in effect when it was created.
    """
    id_produk: int = Field(description="Product identifier")
    nama_produk: Optional[str] = Field(default=None, description="Product name at checkout")
    qty: int = Field(default=1, description="Quantity (always 1 for now)")
    harga: Optional[float] = Field(default=None, description="Sale price at checkout")


class TransaksiFields(BaseModel):
    """Checkout fields stored verbatim alongside the enriched order."""
    totalharga: Optional[float] = Field(default=None, ge=0, examples=[15000])
    metodepembayaran: Optional[str] = Field(default=None, examples=["Cash"])
    statuspembayaran: Optional[str] = Field(default=None, examples=["Lunas"])
    modeserving: Optional[str] = Field(default=None, examples=["Dine-in"])
    nomormeja: Optional[str] = Field(default=None, examples=["A1"])
    namapemesan: Optional[str] = Field(default=None, examples=["Budi"])
    nomorpemesan: Optional[str] = Field(default=None, examples=["08123456789"])
    id_pemesan: Optional[str] = Field(default=None, examples=["u1"])
    id_mitra: Optional[str] = Field(default=None, examples=["mitra456"])

    @field_validator("nomormeja", "id_pemesan", "id_mitra", "nomorpemesan", mode="before")
    @classmethod
    def coerce_to_string(cls, v: Any) -> Any:
        """Table numbers and ids arrive as numbers from some clients."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class TransaksiCreate(TransaksiFields):
    """Body of POST /api/transaksi."""
    # StrictInt: JSON true must not become product 1
    pesanan: List[StrictInt] = Field(
        default=None,
        validate_default=True,
        description="Product ids being ordered (one order line per entry)",
        examples=[[1, 2]],
    )

    @field_validator("pesanan", mode="before")
    @classmethod
    def require_non_empty_list(cls, v: Any) -> Any:
        if not isinstance(v, list) or len(v) == 0:
            raise ValueError("pesanan must be a non-empty array of product ids")
        return v


class TransaksiUpdate(BaseModel):
    """Body of PUT /api/transaksi/{id_pemesan}. Only sent fields are written."""
    statuspembayaran: Optional[str] = Field(default=None, examples=["paid"])
    modeserving: Optional[str] = Field(default=None, examples=["dine-in"])
    nomormeja: Optional[str] = None
    metodepembayaran: Optional[str] = None

    @field_validator("nomormeja", mode="before")
    @classmethod
    def coerce_table_number(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class TransaksiResponse(TransaksiFields):
    """A stored transaction with its order lines decoded."""
    id: int
    totalharga: Optional[float] = None
    tanggaltransaksi: Optional[datetime] = None
    pesanan: List[Any] = Field(default_factory=list, description="Order lines (or product ids for legacy rows)")

    model_config = {"from_attributes": True}

    @field_validator("pesanan", mode="before")
    @classmethod
    def decode_pesanan(cls, v: Any) -> Any:
        entries = load_pesanan(v)
        return entries if entries is not None else []


class TransaksiDetail(TransaksiResponse):
    """A transaction joined with the catalog rows it references."""
    produk: List[ProdukResponse] = Field(default_factory=list)
