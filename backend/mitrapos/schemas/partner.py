"""
Mitra POS Backend — Partner & User Schemas
============================================

Users expose `namaLengkap` on the wire (existing clients use that key) while
the Python attribute is `nama_lengkap`. Both spellings are accepted on input.
The password is write-only: it appears in create/update bodies and never in
UserResponse.
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class MitraPayload(BaseModel):
    """Body of POST /api/mitra and PUT /api/mitra/{id}."""
    namamitra: Optional[str] = Field(default=None, examples=["Warung Kopi Senja"])
    lokasimitra: Optional[str] = Field(default=None, examples=["Bandung"])
    nomorhandphone: Optional[str] = Field(default=None, examples=["08123456789"])
    nama_pic: Optional[str] = Field(default=None, description="Person in charge")
    nik_pic: Optional[str] = Field(default=None, description="National ID of the person in charge")


class MitraResponse(MitraPayload):
    id: int

    model_config = {"from_attributes": True}


_NAMA_LENGKAP = dict(
    default=None,
    validation_alias=AliasChoices("namaLengkap", "nama_lengkap"),
    serialization_alias="namaLengkap",
)


class UserCreate(BaseModel):
    username: str = Field(min_length=1, examples=["johndoe"])
    password: str = Field(min_length=1, examples=["password123"])
    role: Optional[str] = Field(default=None, examples=["kasir"])
    mitra_id: Optional[int] = Field(default=None)
    nama_lengkap: Optional[str] = Field(**_NAMA_LENGKAP)


class UserUpdate(BaseModel):
    username: Optional[str] = Field(default=None, min_length=1)
    password: Optional[str] = Field(default=None, min_length=1)
    role: Optional[str] = None
    mitra_id: Optional[int] = None
    nama_lengkap: Optional[str] = Field(**_NAMA_LENGKAP)


class UserResponse(BaseModel):
    id: int
    username: str
    role: Optional[str] = None
    mitra_id: Optional[int] = None
    nama_lengkap: Optional[str] = Field(**_NAMA_LENGKAP)

    model_config = {"from_attributes": True}
