"""Ruta que entrega el documento de la página de inicio."""

from fastapi import APIRouter, Depends

from greeting_app.application.use_cases import get_home
from greeting_app.interfaces.api.dependencies import require_allowed_origin
from greeting_app.interfaces.api.schemas import HomeRead

router = APIRouter(prefix="/api", tags=["home"])


@router.get(
    "/home",
    response_model=HomeRead,
    dependencies=[Depends(require_allowed_origin)],
)
async def read_home() -> HomeRead:
    """Devuelve el mensaje de bienvenida y la lista de personas."""

    return HomeRead.from_document(get_home())


__all__ = ["router"]
