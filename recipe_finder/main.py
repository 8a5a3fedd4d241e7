"""Application entrypoint: a terminal rendition of the recipe search screen."""

from __future__ import annotations

import asyncio
import threading
from typing import Callable

from recipe_finder.config import FinderSettings, get_settings
from recipe_finder.domain.models import SessionState
from recipe_finder.logging import configure_logging, logger
from recipe_finder.services.meal_search import MealSearchClient, build_http_client
from recipe_finder.services.search_session import SearchSession
from recipe_finder.ui.render import render_state

PROMPT = "Find Recipes: "


def read_query() -> str | None:
    """Block on stdin for the next query; ``None`` once input is exhausted."""

    try:
        return input(PROMPT)
    except EOFError:
        return None


async def read_in_background(reader: Callable[[], str | None]) -> str | None:
    """Run a blocking ``reader`` on a daemon thread and await its answer.

    The thread is never joined: if the loop is interrupted while the user
    sits at the prompt, shutdown does not wait for the pending read.
    """

    loop = asyncio.get_running_loop()
    future: asyncio.Future[str | None] = loop.create_future()

    def _deliver(value: str | None, error: BaseException | None) -> None:
        if future.done():
            return
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(value)

    def _worker() -> None:
        value: str | None = None
        error: BaseException | None = None
        try:
            value = reader()
        except Exception as exc:
            error = exc
        if loop.is_closed():
            return
        loop.call_soon_threadsafe(_deliver, value, error)

    threading.Thread(target=_worker, name="recipe-finder-input", daemon=True).start()
    return await future


async def run_screen(
    session: SearchSession,
    settings: FinderSettings,
    *,
    reader: Callable[[], str | None] = read_query,
    writer: Callable[[str], None] = print,
) -> None:
    def _render(state: SessionState) -> None:
        writer(render_state(state, settings.preview_length))

    unsubscribe = session.subscribe(_render)
    try:
        while True:
            query = await read_in_background(reader)
            if query is None:
                break
            session.search(query)
            await session.wait_idle()
    finally:
        unsubscribe()


async def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    async with build_http_client(settings) as http_client:
        client = MealSearchClient(http_client, settings=settings)
        session = SearchSession(client, ignore_stale_results=settings.ignore_stale_results)
        logger.info(
            "recipe_finder_starting",
            environment=settings.environment,
            search_url=client.search_url,
        )
        try:
            await run_screen(session, settings)
        finally:
            await session.aclose()
    logger.info("recipe_finder_stopped")


def run() -> None:
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("recipe_finder_interrupted")


if __name__ == "__main__":
    run()
