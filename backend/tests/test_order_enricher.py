"""
Mitra POS Backend — Order Enricher Unit Tests
===============================================

What:  Tests for OrderEnricher (product ids → priced order lines).
How:   Mock DB session returning transient Produk objects; no database.

What we test:
    ✅ One line per id, input order preserved, duplicates kept
    ✅ qty is always 1, names/prices copied from the catalog
    ✅ Unknown id aborts with UnresolvedProductError (first missing id)
    ✅ Empty / non-list input rejected before any query
    ✅ Exactly one catalog query regardless of order size
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from mitrapos.exceptions import DatabaseError, UnresolvedProductError, ValidationError
from mitrapos.models.catalog import Produk
from mitrapos.services.order_enricher import OrderEnricher


def _catalog(*products):
    result = MagicMock()
    result.scalars.return_value.all.return_value = list(products)
    return result


KOPI = Produk(id=1, namaproduk="Kopi Hitam", hargajual=15000.0)
TEH = Produk(id=2, namaproduk="Teh Manis", hargajual=8000.0)
ROTI = Produk(id=3, namaproduk="Roti Bakar", hargajual=12000.0)


class TestOrderEnricher:
    def setup_method(self):
        self.enricher = OrderEnricher()

    @pytest.mark.asyncio
    async def test_single_product(self, mock_db_session):
        mock_db_session.execute.return_value = _catalog(KOPI)

        lines = await self.enricher.enrich(mock_db_session, [1])

        assert len(lines) == 1
        assert lines[0].model_dump() == {
            "id_produk": 1,
            "nama_produk": "Kopi Hitam",
            "qty": 1,
            "harga": 15000.0,
        }

    @pytest.mark.asyncio
    async def test_order_follows_input_not_database(self, mock_db_session):
        """Rows come back sorted by id; lines must follow the request."""
        mock_db_session.execute.return_value = _catalog(KOPI, TEH, ROTI)

        lines = await self.enricher.enrich(mock_db_session, [3, 1, 2])

        assert [line.id_produk for line in lines] == [3, 1, 2]
        assert [line.nama_produk for line in lines] == ["Roti Bakar", "Kopi Hitam", "Teh Manis"]

    @pytest.mark.asyncio
    async def test_duplicates_produce_separate_lines(self, mock_db_session):
        mock_db_session.execute.return_value = _catalog(KOPI, TEH)

        lines = await self.enricher.enrich(mock_db_session, [1, 2, 1])

        assert [line.id_produk for line in lines] == [1, 2, 1]
        assert all(line.qty == 1 for line in lines)

    @pytest.mark.asyncio
    async def test_single_query_for_many_ids(self, mock_db_session):
        mock_db_session.execute.return_value = _catalog(KOPI, TEH, ROTI)

        await self.enricher.enrich(mock_db_session, [1, 2, 3, 1, 2, 3, 3])

        mock_db_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unknown_product_rejected(self, mock_db_session):
        mock_db_session.execute.return_value = _catalog(KOPI)

        with pytest.raises(UnresolvedProductError) as exc_info:
            await self.enricher.enrich(mock_db_session, [1, 99, 98])

        assert exc_info.value.product_id == 99
        assert exc_info.value.status_code == 500
        assert exc_info.value.kind.value == "not_found"

    @pytest.mark.asyncio
    async def test_empty_list_rejected_without_query(self, mock_db_session):
        with pytest.raises(ValidationError, match="non-empty array"):
            await self.enricher.enrich(mock_db_session, [])

        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_non_list_rejected(self, mock_db_session):
        with pytest.raises(ValidationError):
            await self.enricher.enrich(mock_db_session, "1,2")

    @pytest.mark.asyncio
    async def test_database_failure_wrapped(self, mock_db_session):
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("connection refused"))
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.enricher.enrich(mock_db_session, [1])

        # SQL details stay out of the client-facing message
        assert "SELECT" not in exc_info.value.message
