"""
Mitra POS Backend — Join Assembler Unit Tests
===============================================

What:  Tests for JoinAssembler and referenced_product_ids.
How:   Transient Transaksi/Produk objects and a mock session; the query count
       is checked through execute.await_count.

What we test:
    ✅ One product query for any number of transactions (including none)
    ✅ Each row only gets the products it references
    ✅ Deleted products are silently dropped (produk: [])
    ✅ Both stored `pesanan` shapes are understood
    ✅ Unreadable `pesanan` text is logged and references nothing
    ✅ A failed product query surfaces as DatabaseError
"""

import json
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from mitrapos.exceptions import DatabaseError

from mitrapos.models.catalog import Produk
from mitrapos.models.transaksi import Transaksi
from mitrapos.services.join_assembler import JoinAssembler, referenced_product_ids


def _catalog(*products):
    result = MagicMock()
    result.scalars.return_value.all.return_value = list(products)
    return result


def _lines(*ids):
    return json.dumps(
        [{"id_produk": pid, "nama_produk": f"P{pid}", "qty": 1, "harga": 1000.0} for pid in ids]
    )


class TestReferencedProductIds:
    def test_enriched_lines(self):
        assert referenced_product_ids(_lines(3, 1)) == [3, 1]

    def test_flat_id_list(self):
        assert referenced_product_ids("[2, 5, 2]") == [2, 5]

    def test_already_decoded(self):
        assert referenced_product_ids([{"id_produk": 4}, 4, "7"]) == [4, 7]

    def test_empty_values(self):
        assert referenced_product_ids(None) == []
        assert referenced_product_ids("") == []
        assert referenced_product_ids("[]") == []

    def test_unusable_entries_skipped(self):
        assert referenced_product_ids([{"nama_produk": "x"}, True, "abc", 1.5, 8]) == [8]

    def test_non_list_json(self):
        assert referenced_product_ids('{"id_produk": 1}') == []

    def test_unicode_digits_are_not_ids(self):
        # "²".isdigit() is True but int("²") raises
        assert referenced_product_ids(["²", "٣", " 6 "]) == [3, 6]

    def test_unreadable_text_logged_with_row_id(self, caplog):
        with caplog.at_level(logging.WARNING, logger="mitrapos.services.join_assembler"):
            assert referenced_product_ids("1,2", row_id=17) == []

        assert "Transaksi 17" in caplog.text


class TestJoinAssembler:
    def setup_method(self):
        self.assembler = JoinAssembler()

    @pytest.mark.asyncio
    async def test_one_query_for_many_rows(self, mock_db_session):
        rows = [Transaksi(id=i, pesanan=_lines(1, 2), id_pemesan=f"u{i}") for i in range(1, 51)]
        mock_db_session.execute.return_value = _catalog(
            Produk(id=1, namaproduk="Kopi Hitam", hargajual=15000.0),
            Produk(id=2, namaproduk="Teh Manis", hargajual=8000.0),
        )

        details = await self.assembler.assemble(mock_db_session, rows)

        assert mock_db_session.execute.await_count == 1
        assert len(details) == 50
        assert all([p.id for p in d.produk] == [1, 2] for d in details)

    @pytest.mark.asyncio
    async def test_rows_only_get_their_products(self, mock_db_session):
        rows = [
            Transaksi(id=1, pesanan=_lines(1), id_pemesan="a"),
            Transaksi(id=2, pesanan=_lines(2, 1), id_pemesan="b"),
        ]
        mock_db_session.execute.return_value = _catalog(
            Produk(id=1, namaproduk="Kopi Hitam"),
            Produk(id=2, namaproduk="Teh Manis"),
        )

        first, second = await self.assembler.assemble(mock_db_session, rows)

        assert [p.namaproduk for p in first.produk] == ["Kopi Hitam"]
        assert [p.namaproduk for p in second.produk] == ["Teh Manis", "Kopi Hitam"]

    @pytest.mark.asyncio
    async def test_deleted_product_yields_empty_list(self, mock_db_session):
        rows = [Transaksi(id=1, pesanan=_lines(9), id_pemesan="u1")]
        mock_db_session.execute.return_value = _catalog()

        (detail,) = await self.assembler.assemble(mock_db_session, rows)

        assert detail.produk == []
        # The order lines captured at checkout are still there
        assert detail.pesanan[0]["id_produk"] == 9

    @pytest.mark.asyncio
    async def test_no_rows_still_single_query(self, mock_db_session):
        mock_db_session.execute.return_value = _catalog()

        details = await self.assembler.assemble(mock_db_session, [])

        assert details == []
        assert mock_db_session.execute.await_count == 1

    @pytest.mark.asyncio
    async def test_legacy_flat_pesanan(self, mock_db_session):
        rows = [Transaksi(id=1, pesanan="[1, 1]", id_pemesan="u1")]
        mock_db_session.execute.return_value = _catalog(Produk(id=1, namaproduk="Kopi Hitam"))

        (detail,) = await self.assembler.assemble(mock_db_session, rows)

        assert detail.pesanan == [1, 1]
        assert [p.id for p in detail.produk] == [1]

    @pytest.mark.asyncio
    async def test_unreadable_pesanan_row_gets_empty_lists(self, mock_db_session):
        rows = [
            Transaksi(id=1, pesanan="1,2", id_pemesan="legacy"),
            Transaksi(id=2, pesanan=_lines(1), id_pemesan="u1"),
        ]
        mock_db_session.execute.return_value = _catalog(Produk(id=1, namaproduk="Kopi Hitam"))

        legacy, valid = await self.assembler.assemble(mock_db_session, rows)

        assert legacy.pesanan == []
        assert legacy.produk == []
        assert [p.id for p in valid.produk] == [1]

    @pytest.mark.asyncio
    async def test_database_failure_wrapped(self, mock_db_session):
        rows = [Transaksi(id=1, pesanan=_lines(1), id_pemesan="u1")]
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("connection refused"))
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.assembler.assemble(mock_db_session, rows)

        assert "connection refused" not in exc_info.value.message
