from fastapi import FastAPI

from .auth import router as auth_router
from .groups import router as groups_router
from .notices import router as notices_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(groups_router)
    app.include_router(notices_router)
