from fastapi import FastAPI

from .activity_logs import router as activity_logs_router
from .auth import router as auth_router
from .notifications import router as notifications_router
from .program_announcements import router as program_announcements_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(notifications_router)
    app.include_router(program_announcements_router)
    app.include_router(activity_logs_router)
