"""Domain entity representing the document served by the home endpoint."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class GreetingDocument:
    """A greeting message followed by an ordered list of people.

    ``people`` keeps display order; names may repeat.
    """

    message: str
    people: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.people, tuple):
            object.__setattr__(self, "people", tuple(self.people))

    @classmethod
    def from_payload(cls, payload: Any) -> "GreetingDocument":
        """Build a document from a decoded JSON body, filling in defaults.

        A missing ``message`` becomes ``""`` and a missing or non-list
        ``people`` becomes an empty sequence. Bodies that are not JSON objects
        are treated as ``{}``.
        """

        if not isinstance(payload, Mapping):
            payload = {}

        message = payload.get("message")
        people = payload.get("people")

        return cls(
            message="" if message is None else str(message),
            people=_coerce_people(people),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "people": list(self.people)}


def _coerce_people(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(str(person) for person in value)


__all__ = ["GreetingDocument"]
