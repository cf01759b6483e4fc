"""
Mitra POS Backend — Pengajuan SQLAlchemy Model
================================================

What:  A stock submission raised by a partner: who asked (`id_pemohon`),
       for what product name and how many, and its approval state.
"""

from datetime import date

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from mitrapos.database import Base


class Pengajuan(Base):
    __tablename__ = "pengajuan"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id_pemohon: Mapped[str | None] = mapped_column(String(255), nullable=True)
    namaproduk: Mapped[str | None] = mapped_column(String(255), nullable=True)
    jumlah: Mapped[int | None] = mapped_column(Integer, nullable=True)
    tanggal_pengajuan: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str | None] = mapped_column(String(50), nullable=True)
    tanggal_approve: Mapped[date | None] = mapped_column(Date, nullable=True)
    id_mitra: Mapped[str | None] = mapped_column(String(255), nullable=True)
