"""
Mitra POS Backend — Catalog SQLAlchemy Models
===============================================

What:  ORM models for `produk` and its taxonomy tables (`kategori`,
       `subkategori`, `supplier`).
Who:   Written by the catalog CRUD routes; `produk` is read (never written)
       by the order enricher and the transaction join assembler.

Table Design Notes:
    - Integer primary keys: transactions reference products by these ids
      inside their serialized `pesanan` field.
    - kategori / subkategori / supplier on `produk` are free-text labels,
      not foreign keys. Deleting a category never cascades into products.
    - Prices are floats so they serialize as JSON numbers.
"""

from sqlalchemy import Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from mitrapos.database import Base


class Produk(Base):
    """A sellable catalog item."""

    __tablename__ = "produk"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    namaproduk: Mapped[str | None] = mapped_column(String(255), nullable=True)
    kategori: Mapped[str | None] = mapped_column(String(255), nullable=True)
    subkategori: Mapped[str | None] = mapped_column(String(255), nullable=True)
    supplier: Mapped[str | None] = mapped_column(String(255), nullable=True)
    jmlstok: Mapped[int | None] = mapped_column(Integer, nullable=True)
    # Image reference (URL or storage key)
    fotoproduk: Mapped[str | None] = mapped_column(Text, nullable=True)
    hargajual: Mapped[float | None] = mapped_column(Float, nullable=True)
    hargamodal: Mapped[float | None] = mapped_column(Float, nullable=True)

    def __repr__(self) -> str:
        return f"<Produk(id={self.id}, namaproduk='{self.namaproduk}')>"


class Kategori(Base):
    __tablename__ = "kategori"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nama_kategori: Mapped[str | None] = mapped_column(String(255), nullable=True)


class Subkategori(Base):
    __tablename__ = "subkategori"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nama_subkategori: Mapped[str | None] = mapped_column(String(255), nullable=True)


class Supplier(Base):
    # Table is singular; the HTTP resource is /suppliers
    __tablename__ = "supplier"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nama_supplier: Mapped[str | None] = mapped_column(String(255), nullable=True)
