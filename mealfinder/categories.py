"""
Category bar state.

The category bar shows one chip per TheMealDB category plus a leading "All"
chip. Exactly one chip is active at a time, and the active chip's value is the
page's CategorySelection, which is handed to every fetch.

"No filter" is represented by the ALL_CATEGORIES sentinel rather than the
string "All", so a real category with that name could never be confused with
it.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from mealfinder.connectors.base import BaseRecipeSource, MealDBError

logger = logging.getLogger(__name__)

ALL_CATEGORIES_LABEL = "All"


class AllCategories(enum.Enum):
    """Single-member enum used as the "no category filter" sentinel."""
    TOKEN = "all"

    def __repr__(self) -> str:
        return "ALL_CATEGORIES"


ALL_CATEGORIES = AllCategories.TOKEN

CategorySelection = Union[AllCategories, str]


def selected_category_name(selection: CategorySelection) -> Optional[str]:
    """
    Map a selection to the category name used for filtering.

    Returns:
        None for the ALL_CATEGORIES sentinel, otherwise the category name.
    """
    if selection is ALL_CATEGORIES:
        return None
    return selection


@dataclass
class CategoryChip:
    """A selectable category filter control."""
    label: str
    value: CategorySelection
    active: bool = False


@dataclass
class CategoryBar:
    """
    Chips plus the single current selection.

    Attributes:
        selection: Current category (defaults to ALL_CATEGORIES)
        chips: Rendered chips, empty until load() succeeds
        loaded: Whether load() has been attempted
    """
    selection: CategorySelection = ALL_CATEGORIES
    chips: List[CategoryChip] = field(default_factory=list)
    loaded: bool = False

    def load(self, source: BaseRecipeSource) -> List[CategoryChip]:
        """
        Load category names and build the chips.

        A failed load leaves the bar empty; it never raises, so the rest of
        the page keeps working.

        Args:
            source: Recipe source providing list_categories()

        Returns:
            The chips that were built (possibly empty).
        """
        self.loaded = True
        try:
            names = source.list_categories()
        except MealDBError as e:
            logger.warning("Could not load categories: %s", e)
            self.chips = []
            return self.chips

        self.chips = [CategoryChip(label=ALL_CATEGORIES_LABEL, value=ALL_CATEGORIES)]
        self.chips.extend(CategoryChip(label=name, value=name) for name in names)
        for chip in self.chips:
            chip.active = chip.value == self.selection
        logger.debug("Loaded %d category chip(s)", len(self.chips))
        return self.chips

    def select(self, index: int) -> CategorySelection:
        """
        Select the chip at the given position.

        Marks exactly that chip active and every other chip inactive.

        Raises:
            IndexError: If no chip exists at index.
        """
        chosen = self.chips[index]
        for position, chip in enumerate(self.chips):
            chip.active = position == index
        self.selection = chosen.value
        return self.selection

    @property
    def active_chips(self) -> List[CategoryChip]:
        return [chip for chip in self.chips if chip.active]
