"""
Recipe fetch pipeline.

This module decides which TheMealDB endpoint a fetch should hit and runs it:

- A non-empty query always wins: search.php?s=<query>
- Otherwise a selected category filters: filter.php?c=<category>
- Otherwise the default query term is searched so the page shows something

The outcome is classified into ok / empty / error so the page can render
cards, the "no recipes" message or the generic failure message.

Fetch flow: Streamlit -> RecipeBrowser.fetch() -> fetch_recipes() -> connector -> MealSummary list -> SearchOutcome
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from mealfinder.categories import CategorySelection, selected_category_name
from mealfinder.config import MealDBConfig
from mealfinder.connectors.base import BaseRecipeSource, MealDBError
from mealfinder.models import MealSummary

logger = logging.getLogger(__name__)


class SearchRoute(str, enum.Enum):
    BY_NAME = "search_by_name"
    BY_CATEGORY = "filter_by_category"


@dataclass(frozen=True)
class SearchRequest:
    route: SearchRoute
    term: str


def build_search_request(
    query: str,
    selection: CategorySelection,
    default_query: Optional[str] = None,
) -> SearchRequest:
    """
    Choose the endpoint and term for a fetch.

    Args:
        query: Already-trimmed search text ("" when the user typed nothing)
        selection: Current category selection
        default_query: Term used when there is neither a query nor a category
                       (defaults to MEALDB_DEFAULT_QUERY / "chicken")

    Returns:
        SearchRequest naming the connector operation and its argument.

    Examples:
        >>> build_search_request("pasta", "Seafood").route
        <SearchRoute.BY_NAME: 'search_by_name'>
        >>> build_search_request("", "Seafood").term
        'Seafood'
    """
    if query:
        return SearchRequest(SearchRoute.BY_NAME, query)
    category = selected_category_name(selection)
    if category:
        return SearchRequest(SearchRoute.BY_CATEGORY, category)
    return SearchRequest(SearchRoute.BY_NAME, default_query or MealDBConfig.get_default_query())


class SearchStatus(str, enum.Enum):
    OK = "ok"
    EMPTY = "empty"
    ERROR = "error"


@dataclass(frozen=True)
class SearchOutcome:
    request: SearchRequest
    status: SearchStatus
    meals: Tuple[MealSummary, ...] = ()
    error: Optional[str] = None


def fetch_recipes(
    source: BaseRecipeSource,
    query: str,
    selection: CategorySelection,
    default_query: Optional[str] = None,
) -> SearchOutcome:
    """
    Run one fetch against the recipe source.

    Failures are not raised; they come back as a SearchOutcome with
    status ERROR so the caller can show the generic message.
    """
    request = build_search_request(query, selection, default_query)
    logger.debug("Fetching recipes via %s(%r)", request.route.value, request.term)

    try:
        if request.route is SearchRoute.BY_CATEGORY:
            meals = source.filter_by_category(request.term)
        else:
            meals = source.search_by_name(request.term)
    except MealDBError as e:
        logger.warning("Recipe fetch via %s(%r) failed: %s", request.route.value, request.term, e)
        return SearchOutcome(request=request, status=SearchStatus.ERROR, error=str(e))

    if not meals:
        return SearchOutcome(request=request, status=SearchStatus.EMPTY)

    logger.info("Fetched %d recipe(s) via %s(%r)", len(meals), request.route.value, request.term)
    return SearchOutcome(request=request, status=SearchStatus.OK, meals=tuple(meals))
