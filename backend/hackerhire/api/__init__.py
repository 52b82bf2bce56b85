"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses
    - Storage reached only through the get_storage dependency

Design Decisions:
    - Thin routes delegate joins and rules to services (ADR: ExMA impureim sandwich)
"""
