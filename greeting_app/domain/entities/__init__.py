"""Domain entities exposed by the application."""

from .greeting import GreetingDocument
from .origin_allowlist import OriginAllowlist

__all__ = [
    "GreetingDocument",
    "OriginAllowlist",
]
