"""
Mitra POS Backend — Order Enricher
====================================

What:  Turns the product ids submitted with a checkout into priced order
       lines, ready to be serialized into `transaksi.pesanan`.
Who:   Called by TransaksiService.create_transaksi before the insert.

Contract:
    input   [3, 1, 3]
    output  [OrderLine(id_produk=3, nama_produk=..., qty=1, harga=...),
             OrderLine(id_produk=1, ...),
             OrderLine(id_produk=3, ...)]

    - One line per input id: same length, same order, duplicates kept.
    - qty is always 1; the request format has no quantity field.
    - Any id missing from the catalog aborts the whole order with
      UnresolvedProductError naming the first missing id (input order).
      Nothing has been written at that point, so there is nothing to undo.

Lookup Strategy:
    The ids are resolved with a single `produk.id IN (...)` query and mapped
    back by id. Output order comes from the input list, not from the order
    the database returns rows in.
"""

import logging
from typing import Dict, List, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mitrapos.exceptions import DatabaseError, UnresolvedProductError, ValidationError
from mitrapos.models.catalog import Produk
from mitrapos.schemas.transaksi import OrderLine

logger = logging.getLogger(__name__)

DEFAULT_QTY = 1


class OrderEnricher:
    """Resolves product ids to order lines using the current catalog."""

    async def enrich(self, db: AsyncSession, product_ids: Sequence[int]) -> List[OrderLine]:
        """
        Build one order line per product id.

        Raises:
            ValidationError:        product_ids is not a non-empty list
            UnresolvedProductError: an id has no matching product
            DatabaseError:          the catalog lookup failed
        """
        if not isinstance(product_ids, (list, tuple)) or len(product_ids) == 0:
            raise ValidationError(
                message="pesanan must be a non-empty array of product ids",
                field="pesanan",
            )

        catalog = await self._load_products(db, product_ids)

        lines: List[OrderLine] = []
        for product_id in product_ids:
            produk = catalog.get(product_id)
            if produk is None:
                logger.warning("Order rejected: produk %s does not exist", product_id)
                raise UnresolvedProductError(product_id)
            lines.append(
                OrderLine(
                    id_produk=product_id,
                    nama_produk=produk.namaproduk,
                    qty=DEFAULT_QTY,
                    harga=produk.hargajual,
                )
            )

        logger.debug("Enriched %d order lines from %d products", len(lines), len(catalog))
        return lines

    async def _load_products(
        self, db: AsyncSession, product_ids: Sequence[int]
    ) -> Dict[int, Produk]:
        wanted = sorted(set(product_ids))
        try:
            result = await db.execute(select(Produk).where(Produk.id.in_(wanted)))
            return {produk.id: produk for produk in result.scalars().all()}
        except SQLAlchemyError as e:
            logger.error("Database error resolving products %s: %s", wanted, str(e))
            raise DatabaseError(
                message="Could not resolve the ordered products. Please try again.",
                context={"product_ids": wanted, "error_type": type(e).__name__},
            )


# ── Singleton Instance ────────────────────────────────────────────────────
order_enricher = OrderEnricher()
