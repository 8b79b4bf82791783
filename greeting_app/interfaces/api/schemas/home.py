"""Pydantic models describing the home endpoint payload."""

from __future__ import annotations

from pydantic import BaseModel, Field

from greeting_app.domain.entities import GreetingDocument


class HomeRead(BaseModel):
    """Greeting message and people displayed on the home page."""

    message: str = Field(..., description="Mensaje de bienvenida")
    people: list[str] = Field(default_factory=list, description="Personas en orden de visualización")

    @classmethod
    def from_document(cls, document: GreetingDocument) -> "HomeRead":
        return cls.model_validate(document.to_dict())


__all__ = ["HomeRead"]
