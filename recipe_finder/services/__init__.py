from recipe_finder.services.exceptions import FetchFailure, ParseError, ServiceError
from recipe_finder.services.meal_search import MealSearchClient, build_http_client
from recipe_finder.services.search_session import SearchSession

__all__ = [
    "FetchFailure",
    "MealSearchClient",
    "ParseError",
    "SearchSession",
    "ServiceError",
    "build_http_client",
]
