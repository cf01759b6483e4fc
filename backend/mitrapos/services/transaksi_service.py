"""
Mitra POS Backend — Transaksi Service (Business Logic Orchestrator)
=====================================================================

What:  All transaction operations: checkout, reads with product joins,
       payment/serving updates and deletion.
How:   Composes OrderEnricher (create) and JoinAssembler (reads) around
       plain SQLAlchemy statements.
Who:   Called by the /api/transaksi route handlers.

Checkout Flow (POST /api/transaksi):
    ┌──────────┐    ┌──────────────┐    ┌───────────────┐    ┌──────────┐
    │  Body    │───▶│ OrderEnricher│───▶│ json.dumps    │───▶│ INSERT   │
    │ (ids)    │    │ (1 lookup)   │    │ (order lines) │    │ (1 row)  │
    └──────────┘    └──────────────┘    └───────────────┘    └──────────┘
    Enrichment completes before anything is written; an unknown product
    means no row is inserted.

Read Flow (GET /api/transaksi[/{id_pemesan}]):
    SELECT transaksi → JoinAssembler (1 product lookup) → TransaksiDetail[]

Known simplifications (kept intentionally):
    - Caller quantities are ignored; every line has qty=1.
    - Lookup by customer id returns only that customer's first transaction.

Like the other services this class is stateless: every method receives the
request's AsyncSession and only flushes. The commit happens once, in
database.get_db_session.
"""

import json
import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mitrapos.exceptions import DatabaseError, NotFoundError
from mitrapos.models.transaksi import Transaksi
from mitrapos.schemas.transaksi import (
    TransaksiCreate,
    TransaksiDetail,
    TransaksiResponse,
    TransaksiUpdate,
)
from mitrapos.services.join_assembler import join_assembler
from mitrapos.services.order_enricher import order_enricher

logger = logging.getLogger(__name__)


class TransaksiService:
    """
    Business logic layer for transactions.

    Error Handling Strategy:
        Enricher/assembler exceptions propagate unchanged. SQLAlchemy errors
        raised here are wrapped in DatabaseError so no SQL reaches a client.
    """

    async def create_transaksi(
        self, db: AsyncSession, payload: TransaksiCreate
    ) -> TransaksiResponse:
        """
        Enrich the ordered product ids and insert one transaction row.

        Raises:
            ValidationError:        empty or missing pesanan
            UnresolvedProductError: an ordered product does not exist
            DatabaseError:          lookup or insert failed
        """
        lines = await order_enricher.enrich(db, payload.pesanan)

        fields = payload.model_dump(exclude={"pesanan"})
        transaksi = Transaksi(
            pesanan=json.dumps([line.model_dump() for line in lines]),
            **fields,
        )
        try:
            db.add(transaksi)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error inserting transaksi: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the transaction. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info(
            "Transaksi %s created for pemesan=%s with %d lines",
            transaksi.id,
            transaksi.id_pemesan,
            len(lines),
        )
        return TransaksiResponse.model_validate(transaksi)

    async def list_transaksi(self, db: AsyncSession) -> List[TransaksiDetail]:
        """Every transaction, oldest first, each with its `produk` attached."""
        rows = await self._select(db, select(Transaksi).order_by(Transaksi.id))
        return await join_assembler.assemble(db, rows)

    async def get_transaksi_by_pemesan(
        self, db: AsyncSession, id_pemesan: str
    ) -> TransaksiDetail:
        """
        The first transaction recorded for a customer, with products.

        Raises:
            NotFoundError: the customer has no transactions
        """
        rows = await self._select(
            db,
            select(Transaksi)
            .where(Transaksi.id_pemesan == id_pemesan)
            .order_by(Transaksi.id),
        )
        if not rows:
            raise NotFoundError(
                resource="transaksi",
                resource_id=id_pemesan,
                message="Transaction not found",
            )

        # Only the first match is joined and returned
        details = await join_assembler.assemble(db, rows[:1])
        return details[0]

    async def update_transaksi_by_pemesan(
        self, db: AsyncSession, id_pemesan: str, payload: TransaksiUpdate
    ) -> List[TransaksiResponse]:
        """
        Apply the supplied payment/serving fields to every transaction of a
        customer and return the updated rows.

        Raises:
            NotFoundError: no transaction matched id_pemesan
        """
        rows = await self._select(
            db,
            select(Transaksi)
            .where(Transaksi.id_pemesan == id_pemesan)
            .order_by(Transaksi.id),
        )
        if not rows:
            raise NotFoundError(
                resource="transaksi",
                resource_id=id_pemesan,
                message="Transaction not found",
            )

        changes = payload.model_dump(exclude_unset=True)
        for row in rows:
            for field, value in changes.items():
                setattr(row, field, value)

        await self._flush(db, "updating", id_pemesan)
        logger.info(
            "Updated %d transaksi for pemesan=%s: %s",
            len(rows),
            id_pemesan,
            sorted(changes),
        )
        return [TransaksiResponse.model_validate(row) for row in rows]

    async def delete_transaksi(
        self, db: AsyncSession, transaksi_id: int
    ) -> List[TransaksiResponse]:
        """
        Delete the transaction with `transaksi_id` and return what was removed.

        An unknown id deletes nothing and returns [].
        """
        try:
            transaksi = await db.get(Transaksi, transaksi_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching transaksi %s: %s", transaksi_id, str(e))
            raise DatabaseError(context={"transaksi_id": transaksi_id})

        if transaksi is None:
            logger.info("Transaksi %s not found; nothing deleted", transaksi_id)
            return []

        deleted = TransaksiResponse.model_validate(transaksi)
        await db.delete(transaksi)
        await self._flush(db, "deleting", transaksi_id)
        logger.info("Transaksi %s deleted", transaksi_id)
        return [deleted]

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _select(self, db: AsyncSession, query) -> List[Transaksi]:
        try:
            result = await db.execute(query)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error querying transaksi: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve transactions. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def _flush(self, db: AsyncSession, action: str, ref) -> None:
        try:
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error %s transaksi %s: %s", action, ref, str(e))
            raise DatabaseError(context={"ref": str(ref), "error_type": type(e).__name__})


# ── Singleton Instance ────────────────────────────────────────────────────
transaksi_service = TransaksiService()
