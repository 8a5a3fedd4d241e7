"""Pydantic models shared across service/presentation layers."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """One recipe as returned by the search endpoint.

    Wire keys (``idMeal``, ``strMeal``...) are accepted as aliases; every other
    key TheMealDB sends along is ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="idMeal")
    name: str = Field(alias="strMeal")
    thumbnail_url: str = Field(alias="strMealThumb")
    instructions: str = Field(alias="strInstructions")


class SearchResponse(BaseModel):
    # ``meals`` is required; an explicit null is how the API says "no match".
    meals: list[Item] | None


@dataclass(frozen=True, slots=True)
class SessionState:
    results: tuple[Item, ...] | None = None
    loading: bool = False
    error_message: str | None = None

    @property
    def searched(self) -> bool:
        return self.results is not None or self.error_message is not None


__all__ = [
    "Item",
    "SearchResponse",
    "SessionState",
]
