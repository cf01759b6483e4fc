"""Create mitrapos tables

Revision ID: 001
Revises: None
Create Date: 2025-02-01 00:00:00.000000+00:00

What:  Creates the catalog, partner, submission and transaction tables.
How:   Portable column types only (Integer/String/Text/Float/Date/DateTime),
       so the same migration runs on PostgreSQL and SQLite.

Rollback: downgrade() drops every table (destructive: all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True)


def upgrade() -> None:
    op.create_table(
        "produk",
        _id(),
        sa.Column("namaproduk", sa.String(255), nullable=True),
        sa.Column("kategori", sa.String(255), nullable=True),
        sa.Column("subkategori", sa.String(255), nullable=True),
        sa.Column("supplier", sa.String(255), nullable=True),
        sa.Column("jmlstok", sa.Integer(), nullable=True),
        sa.Column("fotoproduk", sa.Text(), nullable=True),
        sa.Column("hargajual", sa.Float(), nullable=True),
        sa.Column("hargamodal", sa.Float(), nullable=True),
    )

    op.create_table("kategori", _id(), sa.Column("nama_kategori", sa.String(255), nullable=True))
    op.create_table("subkategori", _id(), sa.Column("nama_subkategori", sa.String(255), nullable=True))
    op.create_table("supplier", _id(), sa.Column("nama_supplier", sa.String(255), nullable=True))

    op.create_table(
        "mitra",
        _id(),
        sa.Column("namamitra", sa.String(255), nullable=True),
        sa.Column("lokasimitra", sa.String(255), nullable=True),
        sa.Column("nomorhandphone", sa.String(50), nullable=True),
        sa.Column("nama_pic", sa.String(255), nullable=True),
        sa.Column("nik_pic", sa.String(50), nullable=True),
    )

    op.create_table(
        "users",
        _id(),
        sa.Column("username", sa.String(255), nullable=False, unique=True),
        sa.Column("role", sa.String(50), nullable=True),
        sa.Column("mitra_id", sa.Integer(), nullable=True),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("namaLengkap", sa.String(255), nullable=True),
    )

    op.create_table(
        "pengajuan",
        _id(),
        sa.Column("id_pemohon", sa.String(255), nullable=True),
        sa.Column("namaproduk", sa.String(255), nullable=True),
        sa.Column("jumlah", sa.Integer(), nullable=True),
        sa.Column("tanggal_pengajuan", sa.Date(), nullable=True),
        sa.Column("status", sa.String(50), nullable=True),
        sa.Column("tanggal_approve", sa.Date(), nullable=True),
        sa.Column("id_mitra", sa.String(255), nullable=True),
    )

    op.create_table(
        "transaksi",
        _id(),
        sa.Column(
            "tanggaltransaksi",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        # JSON-serialized order lines
        sa.Column("pesanan", sa.Text(), nullable=False, server_default=sa.text("'[]'")),
        sa.Column("totalharga", sa.Float(), nullable=True),
        sa.Column("metodepembayaran", sa.String(100), nullable=True),
        sa.Column("statuspembayaran", sa.String(100), nullable=True),
        sa.Column("modeserving", sa.String(100), nullable=True),
        sa.Column("nomormeja", sa.String(50), nullable=True),
        sa.Column("namapemesan", sa.String(255), nullable=True),
        sa.Column("nomorpemesan", sa.String(50), nullable=True),
        sa.Column("id_pemesan", sa.String(255), nullable=True),
        sa.Column("id_mitra", sa.String(255), nullable=True),
    )

    # GET/PUT /api/transaksi/{id_pemesan} filter on this column
    op.create_index("idx_transaksi_id_pemesan", "transaksi", ["id_pemesan"])


def downgrade() -> None:
    """Drop every table. WARNING: destructive."""
    op.drop_index("idx_transaksi_id_pemesan", table_name="transaksi")
    for table in ("transaksi", "pengajuan", "users", "mitra", "supplier", "subkategori", "kategori", "produk"):
        op.drop_table(table)
