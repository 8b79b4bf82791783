"""Process-wide exception handlers for the HTTP API."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from greeting_app.domain.exceptions import OriginRejected

logger = logging.getLogger(__name__)


async def origin_rejected_handler(request: Request, exc: OriginRejected) -> JSONResponse:
    """Answer rejected origins without exposing the document.

    The CORS middleware does not add ``Access-Control-Allow-Origin`` for
    origins outside the allowlist, so browsers cannot read this response.
    """

    logger.warning(
        "Solicitud rechazada para el origen %s en %s", exc.origin, request.url.path
    )
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"detail": "Origen no permitido"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Error inesperado al procesar %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Error interno del servidor"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registra los manejadores de errores globales de la aplicación."""

    app.add_exception_handler(OriginRejected, origin_rejected_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = [
    "origin_rejected_handler",
    "register_exception_handlers",
    "unhandled_exception_handler",
]
