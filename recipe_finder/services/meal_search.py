"""TheMealDB search integration."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError

from recipe_finder.config import FinderSettings
from recipe_finder.domain.models import Item, SearchResponse
from recipe_finder.logging import logger
from recipe_finder.services.exceptions import FetchFailure, ParseError

SEARCH_PATH = "search.php"
QUERY_PARAM = "s"


class MealSearchClient:
    """Looks recipes up by name.

    One GET per call, no retry and no caching. Every failure surfaces as a
    :class:`FetchFailure` (or its :class:`ParseError` subclass) with a message
    fit for showing to the user.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: FinderSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or FinderSettings()

    @property
    def search_url(self) -> str:
        return f"{self._settings.api_root}{SEARCH_PATH}"

    async def find_items(self, query: str) -> list[Item]:
        # The query goes out exactly as typed; the endpoint decides what an
        # empty or blank name means.
        logger.info("meal_search_request", query=query)
        try:
            response = await self._client.get(self.search_url, params={QUERY_PARAM: query})
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code if exc.response is not None else "unknown"
            reason = exc.response.reason_phrase if exc.response is not None else str(exc)
            logger.warning("meal_search_failed", query=query, status_code=status_code)
            raise FetchFailure(
                f"Meal search failed ({status_code}): {reason or 'unexpected status'}"
            ) from exc
        except httpx.RequestError as exc:
            detail = str(exc) or exc.__class__.__name__
            logger.warning("meal_search_failed", query=query, error=detail)
            raise FetchFailure(f"Meal search request failed: {detail}") from exc

        items = self._parse(response)
        logger.info("meal_search_completed", query=query, count=len(items))
        return items

    def _parse(self, response: httpx.Response) -> list[Item]:
        try:
            payload = SearchResponse.model_validate_json(response.content)
        except ValidationError as exc:
            detail = _describe_validation_error(exc)
            logger.warning("meal_search_unparseable", error=detail)
            raise ParseError(f"Unexpected response from meal search: {detail}") from exc
        return list(payload.meals or [])


def _describe_validation_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


async def _log_request(request: httpx.Request) -> None:
    logger.info("http_request", method=request.method, url=str(request.url))


async def _log_response(response: httpx.Response) -> None:
    # Chunked replies carry no Content-Length; read the body to size it.
    body = await response.aread()
    logger.info(
        "http_response",
        method=response.request.method,
        url=str(response.request.url),
        status_code=response.status_code,
        body_bytes=len(body),
    )


def build_http_client(
    settings: FinderSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the single HTTP client shared by the application."""

    client_kwargs: dict[str, Any] = {"headers": {"Accept": "application/json"}}
    if settings.request_timeout_seconds is not None:
        client_kwargs["timeout"] = settings.request_timeout_seconds
    if settings.log_http_traffic:
        client_kwargs["event_hooks"] = {
            "request": [_log_request],
            "response": [_log_response],
        }
    if transport is not None:
        client_kwargs["transport"] = transport
    return httpx.AsyncClient(**client_kwargs)


__all__ = ["MealSearchClient", "build_http_client", "SEARCH_PATH", "QUERY_PARAM"]
