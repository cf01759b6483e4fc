"""
Mitra POS Backend — Transaksi SQLAlchemy Model
================================================

What:  ORM model representing the `transaksi` (checkout) table.
Who:   Owned by TransaksiService: inserted once at checkout, later updated
       only for payment/serving/table fields, deleted by id.

Column Notes:
    pesanan:
        TEXT holding the JSON-serialized order lines produced by the order
        enricher: [{"id_produk", "nama_produk", "qty", "harga"}, ...].
        Names and prices are frozen at creation time; later catalog edits
        do not change what a transaction says was sold.
        Older rows may hold a flat JSON list of product ids instead; the
        join assembler reads both shapes.
    id_pemesan:
        Customer identifier used by the GET/PUT /transaksi/{id_pemesan}
        lookups. Indexed because it is the main read path.
    tanggaltransaksi:
        UTC, set by Python at insert so every backend stores the same value.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from mitrapos.database import Base


class Transaksi(Base):
    """A single checkout with its serialized order lines."""

    __tablename__ = "transaksi"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tanggaltransaksi: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    pesanan: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    totalharga: Mapped[float | None] = mapped_column(Float, nullable=True)
    metodepembayaran: Mapped[str | None] = mapped_column(String(100), nullable=True)
    statuspembayaran: Mapped[str | None] = mapped_column(String(100), nullable=True)
    modeserving: Mapped[str | None] = mapped_column(String(100), nullable=True)
    nomormeja: Mapped[str | None] = mapped_column(String(50), nullable=True)
    namapemesan: Mapped[str | None] = mapped_column(String(255), nullable=True)
    nomorpemesan: Mapped[str | None] = mapped_column(String(50), nullable=True)
    id_pemesan: Mapped[str | None] = mapped_column(String(255), nullable=True)
    id_mitra: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __table_args__ = (
        Index("idx_transaksi_id_pemesan", "id_pemesan"),
    )

    def __repr__(self) -> str:
        return (
            f"<Transaksi(id={self.id}, id_pemesan='{self.id_pemesan}', "
            f"statuspembayaran='{self.statuspembayaran}')>"
        )
