"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Domain enums from core/ used for status/type fields
    - Response schemas never expose password hashes

Design Decisions:
    - Separate from entities: schemas are API contracts, entities are storage records (ADR: DDD boundary)
"""
