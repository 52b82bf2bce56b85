"""Infrastructure Layer — storage backends and cross-cutting concerns.

Invariants:
    - Infrastructure implements core/ protocols; it never imports services/ or api/
    - SQL errors mapped to DatabaseError before leaving this layer

Design Decisions:
    - Two interchangeable Storage backends (memory, SQL) selected by settings (ADR: injected store)
"""
