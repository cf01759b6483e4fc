# Models package init
"""
Importing this package registers every table on Base.metadata, which both
create_all (database.create_all_tables) and Alembic's autogenerate rely on.
"""

from mitrapos.models.catalog import Kategori, Produk, Subkategori, Supplier
from mitrapos.models.partner import Mitra, User
from mitrapos.models.pengajuan import Pengajuan
from mitrapos.models.transaksi import Transaksi

__all__ = [
    "Kategori",
    "Mitra",
    "Pengajuan",
    "Produk",
    "Subkategori",
    "Supplier",
    "Transaksi",
    "User",
]
