"""Exceptions raised by the domain layer."""

from __future__ import annotations


class OriginRejected(PermissionError):
    """Raised when a request declares an origin outside the allowlist."""

    def __init__(self, origin: str) -> None:
        self.origin = origin
        super().__init__(f"Origin '{origin}' is not allowed")


__all__ = ["OriginRejected"]
