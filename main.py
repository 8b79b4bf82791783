import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from greeting_app.config import Settings, get_settings
from greeting_app.interfaces.api.errors import register_exception_handlers
from greeting_app.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Anuncia el arranque del servidor."""

    logger.info("Server started on port %s", app.state.settings.port)
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    """Crea y configura la aplicación principal de FastAPI."""

    settings = settings or get_settings()
    allowlist = settings.origin_allowlist()

    app = FastAPI(title="Greeting API", lifespan=lifespan)
    # Read-only for the lifetime of the process.
    app.state.settings = settings
    app.state.origin_allowlist = allowlist

    # Autoriza peticiones desde la aplicación cliente configurada en CLIENT_URL.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowlist.cors_origins(),
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routes(app)
    return app


def run() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


app = create_app()


if __name__ == "__main__":
    run()
