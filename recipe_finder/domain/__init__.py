from recipe_finder.domain.models import Item, SearchResponse, SessionState

__all__ = ["Item", "SearchResponse", "SessionState"]
