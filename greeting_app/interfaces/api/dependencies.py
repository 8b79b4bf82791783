"""FastAPI dependency utilities."""

from fastapi import Depends, Request, Response

from greeting_app.application.use_cases import ensure_origin_allowed
from greeting_app.domain.entities import OriginAllowlist
from greeting_app.domain.entities.origin_allowlist import WILDCARD


def get_origin_allowlist(request: Request) -> OriginAllowlist:
    """Return the allowlist computed when the application was created."""

    return request.app.state.origin_allowlist


def require_allowed_origin(
    request: Request,
    response: Response,
    allowlist: OriginAllowlist = Depends(get_origin_allowlist),
) -> None:
    """Reject requests whose ``Origin`` header is not in the allowlist.

    Requests without ``Origin`` bypass the CORS middleware, so the wildcard
    header is added here when any origin is allowed.
    """

    origin = request.headers.get("origin")
    ensure_origin_allowed(allowlist, origin)
    if origin is None and allowlist.allow_any:
        response.headers["Access-Control-Allow-Origin"] = WILDCARD
