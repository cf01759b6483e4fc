"""
Mitra POS Backend — Pengajuan Schemas
=======================================

A submission is created with its full field set; afterwards only the
approval fields (status, tanggal_approve, id_mitra) can change.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class PengajuanUpdate(BaseModel):
    """Body of PUT /api/pengajuan/{id}."""
    status: Optional[str] = Field(default=None, examples=["approved"])
    tanggal_approve: Optional[date] = None
    id_mitra: Optional[str] = None


class PengajuanCreate(PengajuanUpdate):
    """Body of POST /api/pengajuan."""
    id_pemohon: Optional[str] = None
    namaproduk: Optional[str] = Field(default=None, examples=["Gula Aren 1kg"])
    jumlah: Optional[int] = Field(default=None, ge=0)
    tanggal_pengajuan: Optional[date] = None


class PengajuanResponse(PengajuanCreate):
    id: int

    model_config = {"from_attributes": True}
