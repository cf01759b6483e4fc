"""
Mitra POS Backend — Transaksi Endpoint Tests
==============================================

What:  End-to-end tests for /api/transaksi against an in-memory database.
How:   HTTPX AsyncClient → FastAPI app → real SQLAlchemy session (SQLite).

What we test:
    ✅ Checkout stores enriched order lines (name, price, qty=1)
    ✅ Reads attach current products; deleted products become produk: []
    ✅ Invalid pesanan → 400 validation, unknown product → 500 not_found
    ✅ A rejected checkout stores nothing
    ✅ PUT by customer id, DELETE by transaction id ([] when nothing matched)
    ✅ Stored rows the schemas would reject on input still read back
    ✅ Catalog and checkout work together through the API alone
"""

import pytest
import pytest_asyncio
from sqlalchemy import func, select

from mitrapos.models.catalog import Produk
from mitrapos.models.transaksi import Transaksi


@pytest_asyncio.fixture
async def kopi(seed):
    (produk,) = await seed(Produk(namaproduk="Kopi Hitam", hargajual=15000, jmlstok=10))
    return produk


async def _count_transaksi(session_factory) -> int:
    async with session_factory() as session:
        return (await session.execute(select(func.count(Transaksi.id)))).scalar_one()


async def _checkout(client, pesanan, id_pemesan="u1", **fields):
    body = {"pesanan": pesanan, "id_pemesan": id_pemesan, "totalharga": 15000, **fields}
    return await client.post("/api/transaksi", json=body)


class TestCreateTransaksi:
    @pytest.mark.asyncio
    async def test_checkout_enriches_lines(self, test_client, kopi):
        response = await _checkout(test_client, [kopi.id], namapemesan="Budi", nomormeja=7)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert data["pesanan"] == [
            {"id_produk": kopi.id, "nama_produk": "Kopi Hitam", "qty": 1, "harga": 15000.0}
        ]
        assert data["id_pemesan"] == "u1"
        assert data["namapemesan"] == "Budi"
        assert data["nomormeja"] == "7"
        assert data["tanggaltransaksi"] is not None

    @pytest.mark.asyncio
    async def test_duplicate_ids_keep_one_line_each(self, test_client, seed):
        kopi, teh = await seed(
            Produk(namaproduk="Kopi Hitam", hargajual=15000),
            Produk(namaproduk="Teh Manis", hargajual=8000),
        )

        response = await _checkout(test_client, [teh.id, kopi.id, teh.id])

        lines = response.json()["data"]["pesanan"]
        assert [line["nama_produk"] for line in lines] == ["Teh Manis", "Kopi Hitam", "Teh Manis"]
        assert {line["qty"] for line in lines} == {1}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("pesanan", [[], None, "1,2", {"id": 1}, [True]])
    async def test_invalid_pesanan_is_400(self, test_client, session_factory, pesanan):
        response = await test_client.post(
            "/api/transaksi", json={"pesanan": pesanan, "id_pemesan": "u1"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["kind"] == "validation"
        assert "pesanan" in body["error"]
        assert await _count_transaksi(session_factory) == 0

    @pytest.mark.asyncio
    async def test_missing_pesanan_is_400(self, test_client):
        response = await test_client.post("/api/transaksi", json={"id_pemesan": "u1"})

        assert response.status_code == 400
        assert response.json()["kind"] == "validation"

    @pytest.mark.asyncio
    async def test_unknown_product_is_500_and_nothing_stored(
        self, test_client, session_factory, kopi
    ):
        response = await _checkout(test_client, [kopi.id, 9999])

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["kind"] == "not_found"
        assert "9999" in body["error"]
        assert await _count_transaksi(session_factory) == 0


class TestReadTransaksi:
    @pytest.mark.asyncio
    async def test_get_by_pemesan_includes_produk(self, test_client, kopi):
        await _checkout(test_client, [kopi.id])

        response = await test_client.get("/api/transaksi/u1")

        assert response.status_code == 200
        data = response.json()["data"]
        assert len(data["produk"]) == 1
        assert data["produk"][0]["namaproduk"] == "Kopi Hitam"
        assert data["produk"][0]["hargajual"] == 15000.0

    @pytest.mark.asyncio
    async def test_get_by_pemesan_returns_first_transaction(self, test_client, kopi):
        first = (await _checkout(test_client, [kopi.id], statuspembayaran="pending")).json()
        await _checkout(test_client, [kopi.id], statuspembayaran="paid")

        data = (await test_client.get("/api/transaksi/u1")).json()["data"]

        assert data["id"] == first["data"]["id"]
        assert data["statuspembayaran"] == "pending"

    @pytest.mark.asyncio
    async def test_deleted_product_leaves_empty_produk(self, test_client, kopi):
        await _checkout(test_client, [kopi.id])
        await test_client.delete(f"/api/produk/{kopi.id}")

        data = (await test_client.get("/api/transaksi/u1")).json()["data"]

        assert data["produk"] == []
        assert data["pesanan"][0]["nama_produk"] == "Kopi Hitam"

    @pytest.mark.asyncio
    async def test_stored_lines_keep_checkout_price(self, test_client, kopi):
        await _checkout(test_client, [kopi.id])
        await test_client.put(f"/api/produk/{kopi.id}", json={"hargajual": 20000})

        data = (await test_client.get("/api/transaksi/u1")).json()["data"]

        assert data["pesanan"][0]["harga"] == 15000.0
        assert data["produk"][0]["hargajual"] == 20000.0

    @pytest.mark.asyncio
    async def test_unknown_pemesan_is_404(self, test_client):
        response = await test_client.get("/api/transaksi/nobody")

        assert response.status_code == 404
        body = response.json()
        assert body["kind"] == "not_found"
        assert body["error"] == "Transaction not found"

    @pytest.mark.asyncio
    async def test_list_all(self, test_client, seed):
        kopi, teh = await seed(
            Produk(namaproduk="Kopi Hitam", hargajual=15000),
            Produk(namaproduk="Teh Manis", hargajual=8000),
        )
        await _checkout(test_client, [kopi.id], id_pemesan="a")
        await _checkout(test_client, [teh.id, kopi.id], id_pemesan="b")

        data = (await test_client.get("/api/transaksi")).json()["data"]

        assert [row["id_pemesan"] for row in data] == ["a", "b"]
        assert [p["namaproduk"] for p in data[0]["produk"]] == ["Kopi Hitam"]
        assert [p["namaproduk"] for p in data[1]["produk"]] == ["Teh Manis", "Kopi Hitam"]

    @pytest.mark.asyncio
    async def test_list_empty(self, test_client):
        response = await test_client.get("/api/transaksi")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": []}


class TestUpdateAndDeleteTransaksi:
    @pytest.mark.asyncio
    async def test_update_applies_to_all_customer_rows(self, test_client, kopi):
        await _checkout(test_client, [kopi.id], statuspembayaran="pending")
        await _checkout(test_client, [kopi.id], statuspembayaran="pending")

        response = await test_client.put(
            "/api/transaksi/u1", json={"statuspembayaran": "paid", "nomormeja": 4}
        )

        assert response.status_code == 200
        rows = response.json()["data"]
        assert len(rows) == 2
        assert {row["statuspembayaran"] for row in rows} == {"paid"}
        assert {row["nomormeja"] for row in rows} == {"4"}

    @pytest.mark.asyncio
    async def test_update_leaves_unsent_fields(self, test_client, kopi):
        await _checkout(test_client, [kopi.id], modeserving="takeaway")

        await test_client.put("/api/transaksi/u1", json={"statuspembayaran": "paid"})

        data = (await test_client.get("/api/transaksi/u1")).json()["data"]
        assert data["modeserving"] == "takeaway"
        assert data["statuspembayaran"] == "paid"

    @pytest.mark.asyncio
    async def test_update_unknown_pemesan_is_404(self, test_client):
        response = await test_client.put("/api/transaksi/nobody", json={"statuspembayaran": "paid"})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_by_id(self, test_client, session_factory, kopi):
        created = (await _checkout(test_client, [kopi.id])).json()["data"]

        response = await test_client.delete(f"/api/transaksi/{created['id']}")

        assert response.status_code == 200
        assert [row["id"] for row in response.json()["data"]] == [created["id"]]
        assert await _count_transaksi(session_factory) == 0

    @pytest.mark.asyncio
    async def test_delete_unknown_matches_nothing(self, test_client, session_factory, kopi):
        await _checkout(test_client, [kopi.id])

        response = await test_client.delete("/api/transaksi/12345")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": []}
        assert await _count_transaksi(session_factory) == 1

    @pytest.mark.asyncio
    async def test_delete_non_numeric_id_is_400(self, test_client):
        response = await test_client.delete("/api/transaksi/abc")

        assert response.status_code == 400


class TestStoredDataTolerance:
    @pytest.mark.asyncio
    async def test_negative_stock_product_joins(self, test_client, seed):
        (oversold,) = await seed(Produk(namaproduk="Kopi Hitam", hargajual=15000, jmlstok=-1))
        await _checkout(test_client, [oversold.id])

        response = await test_client.get("/api/transaksi/u1")

        assert response.status_code == 200
        assert response.json()["data"]["produk"][0]["jmlstok"] == -1
        assert (await test_client.get("/api/transaksi")).status_code == 200

    @pytest.mark.asyncio
    async def test_unreadable_pesanan_row_lists_empty(self, test_client, seed, kopi):
        await seed(Transaksi(pesanan="1,2", id_pemesan="legacy"))
        await _checkout(test_client, [kopi.id])

        response = await test_client.get("/api/transaksi")

        assert response.status_code == 200
        rows = {row["id_pemesan"]: row for row in response.json()["data"]}
        assert rows["legacy"]["pesanan"] == []
        assert rows["legacy"]["produk"] == []
        assert [p["id"] for p in rows["u1"]["produk"]] == [kopi.id]


class TestCatalogToCheckout:
    @pytest.mark.asyncio
    async def test_product_created_via_api_is_sold(self, test_client):
        created = await test_client.post(
            "/api/produk", json={"namaproduk": "Kopi Hitam", "hargajual": 15000}
        )
        produk_id = created.json()["data"]["id"]

        checkout = await test_client.post(
            "/api/transaksi", json={"pesanan": [produk_id], "id_pemesan": "u1"}
        )
        assert checkout.status_code == 201

        response = await test_client.get("/api/transaksi/u1")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["pesanan"] == [
            {"id_produk": produk_id, "nama_produk": "Kopi Hitam", "qty": 1, "harga": 15000.0}
        ]
        assert [p["id"] for p in data["produk"]] == [produk_id]
