import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from barangay.config import get_settings
from barangay.infrastructure.database import engine, initialize_database
from barangay.interfaces.api.errors import register_exception_handlers
from barangay.interfaces.api.routes import register_routes

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str) -> None:
    """Apply ``level`` to the root logger, installing a handler if none exists."""

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the database tables on startup and release the pool on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Barangay API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Refreshed-Token"],
    )

    register_exception_handlers(app)
    register_routes(app)
    return app


app = create_app()
