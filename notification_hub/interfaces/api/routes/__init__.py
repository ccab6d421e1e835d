from fastapi import FastAPI

from .followers import router as followers_router
from .notifications import router as notifications_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(followers_router)
    app.include_router(notifications_router)
