"""Aggregate application use cases."""

from .get_home import get_home
from .origin_policy import ensure_origin_allowed

__all__ = [
    "ensure_origin_allowed",
    "get_home",
]
