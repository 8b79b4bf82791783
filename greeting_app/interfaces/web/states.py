"""Display states of the home page."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Idle:
    """The page has never been mounted."""


@dataclass(frozen=True)
class Loading:
    """A fetch is in flight."""


@dataclass(frozen=True)
class Loaded:
    message: str
    people: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Failed:
    error_message: str


HomePageState = Union[Idle, Loading, Loaded, Failed]


@dataclass(frozen=True)
class DisplayItem:
    """A keyed element produced by :meth:`HomePage.render`."""

    key: str | int
    text: str


__all__ = [
    "DisplayItem",
    "Failed",
    "HomePageState",
    "Idle",
    "Loaded",
    "Loading",
]
