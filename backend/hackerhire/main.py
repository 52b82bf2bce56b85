"""HackerHire API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Storage injected through create_app(storage) and exposed as app.state.storage
    - Global error handlers map HackerHireError → structured JSON responses
    - CORS and session cookie configured from settings (not hardcoded)

Design Decisions:
    - Lifespan over @app.on_event: builds the configured storage when none was
      injected, seeds admins, disposes SQL engines on shutdown
    - App factory plus module-level `app`: uvicorn serves `hackerhire.main:app`,
      tests build their own app around a fresh MemoryStorage (ADR: injected store)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from hackerhire.api.error_handlers import register_error_handlers
from hackerhire.api.routes import (
    account, admin, applications, auth, clients, contact, hackers, health,
    projects, reviews, testimonials, users,
)
from hackerhire.config import get_settings
from hackerhire.core.repository_protocols import Storage
from hackerhire.infrastructure.observability import setup_logging
from hackerhire.infrastructure.seed import seed_admin_users
from hackerhire.infrastructure.storage_factory import build_storage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    owns_storage = getattr(app.state, "storage", None) is None
    if owns_storage:
        app.state.storage = await build_storage(settings)
    if settings.seed_admin_users:
        await seed_admin_users(app.state.storage)
    logger.info("HackerHire API started")
    yield
    logger.info("HackerHire API shutting down")
    dispose = getattr(app.state.storage, "dispose", None)
    if owns_storage and dispose is not None:
        await dispose()


def create_app(storage: Storage | None = None) -> FastAPI:
    """Build the API around `storage`; the lifespan builds one from settings if None."""
    settings = get_settings()
    app = FastAPI(title="HackerHire API", version="1.0.0", lifespan=lifespan)
    app.state.storage = storage

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret_key,
        max_age=settings.session_max_age_seconds,
        https_only=settings.session_https_only,
    )

    register_error_handlers(app)

    # Routes, registered explicitly
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(account.router)
    app.include_router(admin.router)
    app.include_router(users.router)
    app.include_router(projects.router)
    app.include_router(clients.router)
    app.include_router(hackers.router)
    app.include_router(applications.router)
    app.include_router(reviews.router)
    app.include_router(testimonials.router)
    app.include_router(contact.router)
    return app


app = create_app()
