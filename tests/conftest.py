"""Shared pytest fixtures for the search client and session tests."""

from __future__ import annotations

from typing import Any

import httpx
import pytest
import pytest_asyncio


def _meal(
    id_: str = "52771",
    name: str = "Spicy Arrabiata Penne",
    thumb: str = "https://www.themealdb.com/images/media/meals/ustsqw1468250014.jpg",
    instructions: str = "Bring a large pot of water to a boil. Add kosher salt to the boiling water.",
    **extra: Any,
) -> dict[str, Any]:
    payload = {
        "idMeal": id_,
        "strMeal": name,
        "strMealThumb": thumb,
        "strInstructions": instructions,
    }
    payload.update(extra)
    return payload


@pytest.fixture
def meal():
    return _meal


@pytest_asyncio.fixture
async def mock_http():
    """Build ``httpx.AsyncClient`` instances backed by a request handler."""

    clients: list[httpx.AsyncClient] = []

    def _factory(handler) -> httpx.AsyncClient:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    try:
        yield _factory
    finally:
        for client in clients:
            await client.aclose()
