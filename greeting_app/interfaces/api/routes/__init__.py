from fastapi import FastAPI

from .home import router as home_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(home_router)
