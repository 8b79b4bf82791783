"""End-to-end tests: the home page component against the real application."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import httpx
import pytest

pytest.importorskip("fastapi")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from greeting_app.config import Settings  # noqa: E402
from greeting_app.infrastructure.home_api_client import HomeApiClient  # noqa: E402
from greeting_app.interfaces.web import DisplayItem, Failed, HomePage  # noqa: E402
from main import create_app  # noqa: E402


def _render_against_app(settings: Settings, headers: dict[str, str] | None = None) -> HomePage:
    async def scenario() -> HomePage:
        transport = httpx.ASGITransport(app=create_app(settings))
        async with httpx.AsyncClient(
            transport=transport, base_url="http://testserver", headers=headers
        ) as http:
            page = HomePage(HomeApiClient(http_client=http))
            async with page.mounted() as task:
                await task
            return page

    return asyncio.run(scenario())


def test_page_renders_greeting_served_by_the_api():
    page = _render_against_app(Settings(client_url=None))

    assert page.render() == (
        DisplayItem("message", "Hello World!"),
        DisplayItem(0, "Harry"),
        DisplayItem(1, "Jack"),
        DisplayItem(2, "Mary"),
    )


def test_page_from_allowed_origin_loads_document():
    page = _render_against_app(
        Settings(client_url="https://a.example"),
        headers={"Origin": "https://a.example"},
    )

    assert page.render()[0] == DisplayItem("message", "Hello World!")


def test_page_from_rejected_origin_fails_without_document():
    page = _render_against_app(
        Settings(client_url="https://a.example"),
        headers={"Origin": "https://b.example"},
    )

    assert page.state == Failed("HTTP error 403: Forbidden")
