"""FastAPI application entrypoint."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskboard import models  # noqa: F401  registers tables on Base.metadata
from taskboard.api import api_router
from taskboard.core.config import Settings, get_settings
from taskboard.core.logging_setup import configure_logging
from taskboard.db.base import Base
from taskboard.db.session import create_engine, create_session_factory
from taskboard.middleware.errors import register_exception_handlers

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build an application bound to ``settings`` (environment settings by default)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    engine = create_engine(settings)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Taskboard API started (environment: %s)", settings.environment)
        if not settings.secret_key:
            logger.warning("TASKBOARD_SECRET_KEY is not set; registration and login will fail")
        try:
            yield
        finally:
            await engine.dispose()

    app = FastAPI(title=settings.app_name, version=settings.version, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, settings)
    app.include_router(api_router)
    return app


def run() -> None:
    """Serve the application with uvicorn using environment settings."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("taskboard.main:create_app", factory=True, host=settings.host, port=settings.port)
