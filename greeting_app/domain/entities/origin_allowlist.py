"""Domain entity describing which browser origins may read API responses."""

from __future__ import annotations

from dataclasses import dataclass

WILDCARD = "*"


@dataclass(frozen=True)
class OriginAllowlist:
    """Ordered set of exact-match origins, or the "allow any" sentinel.

    ``origins`` is ignored when ``allow_any`` is true.
    """

    origins: tuple[str, ...] = ()
    allow_any: bool = False

    @classmethod
    def unrestricted(cls) -> "OriginAllowlist":
        return cls(allow_any=True)

    @classmethod
    def from_config(cls, raw: str | None) -> "OriginAllowlist":
        """Parse a comma separated ``CLIENT_URL`` value.

        Unset, blank or ``*`` values allow any origin.
        """

        if raw is None or not raw.strip():
            return cls.unrestricted()

        origins: list[str] = []
        for item in raw.split(","):
            origin = item.strip()
            if origin == WILDCARD:
                return cls.unrestricted()
            # Browsers never send a trailing slash in the Origin header.
            if origin.endswith("/"):
                origin = origin[:-1]
            if origin and origin not in origins:
                origins.append(origin)

        if not origins:
            return cls.unrestricted()
        return cls(origins=tuple(origins))

    def allows(self, origin: str | None) -> bool:
        """Return whether a request declaring ``origin`` may be answered.

        Requests without an ``Origin`` header (same-origin or non-browser
        clients) are always allowed; this is a policy choice, not a security
        boundary.
        """

        if self.allow_any or not origin:
            return True
        return origin in self.origins

    def cors_origins(self) -> list[str]:
        """Return the value expected by ``CORSMiddleware(allow_origins=...)``."""

        if self.allow_any:
            return [WILDCARD]
        return list(self.origins)


__all__ = ["OriginAllowlist", "WILDCARD"]
