"""Plain-text rendering of the search screen."""

from __future__ import annotations

from recipe_finder.domain.models import Item, SessionState

ELLIPSIS = "..."
LOADING_TEXT = "Loading..."
NO_RESULTS_TEXT = "No results found"
DEFAULT_PREVIEW_LENGTH = 100


def preview_instructions(text: str, limit: int = DEFAULT_PREVIEW_LENGTH) -> str:
    """Return the first ``limit`` characters followed by an ellipsis.

    The ellipsis is appended even when nothing was cut off; the recipe cards
    have always looked this way.
    """

    return text[:limit] + ELLIPSIS


def render_item(item: Item, preview_length: int = DEFAULT_PREVIEW_LENGTH) -> str:
    lines = [
        item.name,
        f"[image] {item.thumbnail_url}",
        preview_instructions(item.instructions, preview_length),
    ]
    return "\n".join(lines)


def render_state(state: SessionState, preview_length: int = DEFAULT_PREVIEW_LENGTH) -> str:
    if state.loading:
        return LOADING_TEXT
    if state.error_message is not None:
        return state.error_message
    # Same text before the first search and after an empty one.
    if not state.results:
        return NO_RESULTS_TEXT
    return "\n\n".join(render_item(item, preview_length) for item in state.results)


__all__ = [
    "LOADING_TEXT",
    "NO_RESULTS_TEXT",
    "preview_instructions",
    "render_item",
    "render_state",
]
