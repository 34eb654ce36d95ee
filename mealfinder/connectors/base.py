"""
Base recipe source abstract class.

This module defines the abstract base class that every recipe source must
implement. The orchestrator, category bar and detail resolution only talk to
this interface, which keeps them independent from TheMealDB's HTTP details and
lets tests plug in a fake source.

All sources must:
- Implement the source attribute (e.g., "mealdb")
- Return parsed models (MealSummary, MealDetail) rather than raw JSON
- Treat "no matches" as an empty result, never as an error
- Raise MealDBError (or a subclass) for network and parse failures
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from mealfinder.models import MealDetail, MealSummary


class MealDBError(RuntimeError):
    """Generic fetch failure: network error, bad status or unparseable payload."""


class BaseRecipeSource(ABC):
    """
    Abstract base class for recipe sources.

    Attributes:
        source: String identifier for the source (e.g., "mealdb")
    """
    source: str

    @abstractmethod
    def search_by_name(self, text: str) -> List[MealSummary]:
        """
        Search meals whose name matches the given text.

        Args:
            text: Free-text query (e.g., "arrabiata")

        Returns:
            List of meals, empty when nothing matches.
        """

    @abstractmethod
    def filter_by_category(self, name: str) -> List[MealSummary]:
        """
        List meals in a category.

        Args:
            name: Category name (e.g., "Seafood")

        Returns:
            List of reduced meal records (id, name, thumbnail only).
        """

    @abstractmethod
    def lookup_by_id(self, meal_id: str) -> Optional[MealDetail]:
        """
        Fetch the full record for one meal.

        Returns:
            MealDetail, or None if the id is unknown.
        """

    @abstractmethod
    def list_categories(self) -> List[str]:
        """Return all category names in API order."""
