"""Services — orchestration between routes, storage and the pure core.

Invariants:
    - Services fetch via the Storage protocol, shape via core/ pure functions
    - Missing entities surface as ResourceNotFoundError, never as None to routes
    - No service holds state between calls

Design Decisions:
    - Imperative shell around a functional core (ADR: ExMA impureim sandwich)
"""
