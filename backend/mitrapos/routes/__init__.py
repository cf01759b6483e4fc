# Routes package init
"""
Mitra POS Backend — API Routes Package
========================================

Route Inventory:
    - transaksi.py: /api/transaksi          checkout and history (enrich + join)
    - catalog.py:   /api/produk, /api/kategori, /api/subkategori, /api/suppliers
    - partners.py:  /api/mitra, /api/users, /api/pengajuan
    - utility.py:   POST /api/login, POST /api/qrcode
    - health.py:    GET /health
    - crud.py:      router factory used by catalog.py and partners.py

Routes are THIN: parse the request, call a service, wrap the result in the
`{success, data}` envelope. Errors are raised, never caught, here.
"""
