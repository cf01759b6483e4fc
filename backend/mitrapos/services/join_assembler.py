"""
Mitra POS Backend — Transaction Join Assembler
================================================

What:  Attaches the catalog rows a transaction references to that
       transaction, for any number of transactions at once.
Who:   Called by TransaksiService for GET /api/transaksi (all rows) and
       GET /api/transaksi/{id_pemesan} (one row).

How:
    1. Read the product ids referenced by each row's `pesanan`
    2. Union them across all rows
    3. ONE query: SELECT * FROM produk WHERE id IN (union)
    4. For each row, in input order, attach the returned products whose id
       the row references

    ┌──────────┐   ids   ┌─────────────┐  1 query  ┌─────────┐
    │ rows[0..n]│───────▶│ union(ids)  │──────────▶│ produk  │
    └──────────┘         └─────────────┘           └────┬────┘
         ▲                    attach per row            │
         └──────────────────────────────────────────────┘

    The number of queries does not grow with the number of transactions.

Edge cases:
    - Empty `pesanan`, or products deleted since checkout → `produk: []`.
      This is not an error; the order lines in `pesanan` still hold the
      names and prices captured at checkout.
    - A product referenced twice in one order is attached once.
"""

import logging
from itertools import chain
from typing import Any, Dict, Iterable, List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mitrapos.exceptions import DatabaseError
from mitrapos.models.catalog import Produk
from mitrapos.models.transaksi import Transaksi
from mitrapos.schemas.catalog import ProdukResponse
from mitrapos.schemas.transaksi import TransaksiDetail, load_pesanan

logger = logging.getLogger(__name__)


def _as_product_id(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value)
    return None


def referenced_product_ids(pesanan: Any, row_id: Any = None) -> List[int]:
    """
    Product ids referenced by a stored order field.

    Accepts both shapes found in `transaksi.pesanan`, either as JSON text or
    already decoded:
        [1, 2, 2]                                  flat id list
        [{"id_produk": 1, ...}, {"id_produk": 2}]  enriched order lines

    Returns the ids deduplicated, in first-reference order. Entries without a
    usable integer id are skipped, and a value that is not a JSON array
    references nothing (logged with `row_id`).
    """
    entries = load_pesanan(pesanan)
    if entries is None:
        logger.warning("Transaksi %s has an unreadable pesanan; no produk attached", row_id)
        return []

    ids: List[int] = []
    seen = set()
    for entry in entries:
        raw = entry.get("id_produk") if isinstance(entry, dict) else entry
        product_id = _as_product_id(raw)
        if product_id is None or product_id in seen:
            continue
        seen.add(product_id)
        ids.append(product_id)
    return ids


class JoinAssembler:
    """Resolves the `produk` field of transactions with one batched lookup."""

    async def assemble(
        self, db: AsyncSession, rows: Sequence[Transaksi]
    ) -> List[TransaksiDetail]:
        """
        Return `rows` as TransaksiDetail objects with `produk` attached.

        Exactly one product query is issued per call, however many rows are
        passed in (including zero).

        Raises:
            DatabaseError: the product lookup failed
        """
        references = [referenced_product_ids(row.pesanan, row.id) for row in rows]
        catalog = await self._fetch_products(db, chain.from_iterable(references))

        details: List[TransaksiDetail] = []
        for row, product_ids in zip(rows, references):
            detail = TransaksiDetail.model_validate(row)
            detail.produk = [catalog[pid] for pid in product_ids if pid in catalog]
            details.append(detail)
        return details

    async def _fetch_products(
        self, db: AsyncSession, product_ids: Iterable[int]
    ) -> Dict[int, ProdukResponse]:
        wanted = sorted(set(product_ids))
        try:
            result = await db.execute(select(Produk).where(Produk.id.in_(wanted)))
            products = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error joining %d products: %s", len(wanted), str(e))
            raise DatabaseError(
                message="Could not load the products for these transactions.",
                context={"product_count": len(wanted), "error_type": type(e).__name__},
            )
        return {produk.id: ProdukResponse.model_validate(produk) for produk in products}


# ── Singleton Instance ────────────────────────────────────────────────────
join_assembler = JoinAssembler()
