"""Use case enforcing the CORS origin allowlist."""

from __future__ import annotations

from greeting_app.domain.entities.origin_allowlist import OriginAllowlist
from greeting_app.domain.exceptions import OriginRejected


def ensure_origin_allowed(allowlist: OriginAllowlist, origin: str | None) -> None:
    """Raise ``OriginRejected`` when ``origin`` is not permitted by ``allowlist``."""

    if not allowlist.allows(origin):
        raise OriginRejected(origin or "")
