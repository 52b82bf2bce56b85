"""Storage Factory — builds the configured Storage backend.

Invariants:
    - "memory" → MemoryStorage, "sql" → SqlStorage with schema ensured
    - Caller owns the returned storage (lifespan disposes SQL engines)
"""

import logging

from hackerhire.config import Settings
from hackerhire.core.repository_protocols import Storage
from hackerhire.infrastructure.database import DatabaseSessionManager
from hackerhire.infrastructure.memory_storage import MemoryStorage
from hackerhire.infrastructure.sql_storage import SqlStorage

logger = logging.getLogger(__name__)


async def build_storage(settings: Settings) -> Storage:
    if settings.storage_backend == "sql":
        db = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        await db.create_schema()
        logger.info("SQL storage ready", extra={"storage": "sql"})
        return SqlStorage(db)
    logger.info("In-memory storage ready", extra={"storage": "memory"})
    return MemoryStorage()
