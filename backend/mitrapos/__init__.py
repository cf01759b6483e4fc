"""
Mitra POS Backend — Application Package Initializer
====================================================

What: Marks the `mitrapos` directory as a Python package.
Who:  Imported by uvicorn (`mitrapos.main:app`), Alembic and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Enrichment, joins, CRUD
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never talk to the database directly; services receive an
    AsyncSession per call and raise application exceptions that the
    handlers in main.py turn into JSON envelopes.
"""

__version__ = "1.0.0"
