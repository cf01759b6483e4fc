# Services package init
"""
Mitra POS Backend — Services Layer
====================================

What:  Business logic between routes (HTTP) and the database (persistence).
How:   Stateless singletons. Every method receives the request's AsyncSession,
       raises MitraPosError subclasses, and only flushes; the commit belongs
       to database.get_db_session.

Service Inventory:
    - OrderEnricher:    product ids → priced order lines (checkout)
    - JoinAssembler:    transactions + referenced products, one lookup
    - TransaksiService: checkout, history, payment updates, deletion
    - CrudService:      uniform single-table CRUD (one instance per model)
    - AuthService:      username/password login, JWT issuing
    - QrCodeService:    text → PNG data URL
"""
