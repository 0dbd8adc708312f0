"""Entry point for the smart turf booking FastAPI application."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from smartturf.api.v1 import router as v1_router
from smartturf.core.config import Settings, settings as default_settings
from smartturf.core.database import Database
from smartturf.core.error_handlers import register_exception_handlers


def create_app(
    database: Optional[Database] = None,
    config: Optional[Settings] = None,
) -> FastAPI:
    """Build the application around an explicitly constructed database handle."""

    config = config or default_settings
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.database.verify_connection()
        # Ensure database tables exist when the application starts (for development purposes).
        app.state.database.create_all()
        yield
        app.state.database.dispose()

    app = FastAPI(title=config.PROJECT_NAME, lifespan=lifespan)
    app.state.config = config
    app.state.database = database or Database(config=config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
    )

    register_exception_handlers(app)

    app.include_router(v1_router, prefix="/api")

    @app.get("/health")
    def health_check():
        return {
            "status": "healthy",
            "service": config.PROJECT_NAME,
        }

    return app


app = create_app()

__all__ = ["app", "create_app"]
