"""
TheMealDB connector.

This connector talks to the public TheMealDB JSON API and normalizes responses
into MealSummary / MealDetail models.

The connector:
- Issues exactly one GET per operation (no retry, no backoff)
- Preserves TheMealDB's path and query parameter names (search.php?s=,
  filter.php?c=, lookup.php?i=, list.php?c=list)
- Treats a missing, null or empty "meals" list as "no matches"
- Wraps every network, HTTP status and parse failure in MealDBError

The base URL and an optional timeout come from mealfinder.config (MEALDB_BASE_URL,
MEALDB_TIMEOUT_SECONDS).
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from mealfinder.config import MealDBConfig
from mealfinder.models import Category, MealDetail, MealSummary

from .base import BaseRecipeSource, MealDBError

logger = logging.getLogger(__name__)


class MealDBConnector(BaseRecipeSource):
    """
    Recipe source backed by TheMealDB's public v1 API.

    Holds its own requests.Session so connections are reused across the four
    endpoints during a page session.
    """
    source = "mealdb"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the connector.

        Args:
            base_url: API base URL (optional, reads MEALDB_BASE_URL or uses the public host)
            timeout: Request timeout in seconds (optional, reads MEALDB_TIMEOUT_SECONDS;
                     None means no timeout)
            session: Optional requests.Session to reuse
        """
        self.base_url = (base_url or MealDBConfig.get_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else MealDBConfig.get_timeout()
        self.session = session or requests.Session()

    def _get_meals(self, endpoint: str, params: Dict[str, str]) -> List[Dict[str, Any]]:
        """
        GET an endpoint and return its "meals" list.

        Raises:
            MealDBError: On connection errors, non-2xx responses or bad JSON.
        """
        url = f"{self.base_url}/{endpoint}"
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            raise MealDBError(f"Request to {endpoint} failed: {e}") from e
        except ValueError as e:
            # JSONDecodeError subclasses ValueError
            raise MealDBError(f"Invalid JSON from {endpoint}: {e}") from e

        if not isinstance(data, dict):
            raise MealDBError(f"Unexpected payload from {endpoint}: expected an object")

        meals = data.get("meals") or []
        if not isinstance(meals, list):
            raise MealDBError(f"Unexpected payload from {endpoint}: 'meals' is not a list")

        logger.debug("%s returned %d meal(s)", endpoint, len(meals))
        return meals

    def _parse_details(self, endpoint: str, items: List[Dict[str, Any]]) -> List[MealDetail]:
        try:
            return [MealDetail.model_validate(item) for item in items]
        except ValidationError as e:
            raise MealDBError(f"Could not parse meals from {endpoint}: {e}") from e

    def search_by_name(self, text: str) -> List[MealSummary]:
        """
        Search meals by name via search.php?s=<text>.

        search.php returns full records, so results are MealDetail instances
        (which are MealSummary instances as well).
        """
        return self._parse_details("search.php", self._get_meals("search.php", {"s": text}))

    def filter_by_category(self, name: str) -> List[MealSummary]:
        """Filter meals by category via filter.php?c=<name>."""
        items = self._get_meals("filter.php", {"c": name})
        try:
            return [MealSummary.model_validate(item) for item in items]
        except ValidationError as e:
            raise MealDBError(f"Could not parse meals from filter.php: {e}") from e

    def lookup_by_id(self, meal_id: str) -> Optional[MealDetail]:
        """Look up a single meal via lookup.php?i=<id>."""
        details = self._parse_details("lookup.php", self._get_meals("lookup.php", {"i": meal_id}))
        return details[0] if details else None

    def list_categories(self) -> List[str]:
        """List category names via list.php?c=list."""
        items = self._get_meals("list.php", {"c": "list"})
        try:
            categories = [Category.model_validate(item) for item in items]
        except ValidationError as e:
            raise MealDBError(f"Could not parse categories from list.php: {e}") from e
        return [category.name for category in categories if category.name]
