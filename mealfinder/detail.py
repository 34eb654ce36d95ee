"""
Recipe detail modal.

This module covers everything that happens after a card's "Get Recipe" button
is pressed:

- resolve_detail() picks the record to show, looking up the full meal by id
  only when the summary lacks instructions
- build_detail_view() turns that record into the modal content, scanning the
  20 ingredient slots in order
- RecipeModal tracks the open overlay and its dismissal. Opening attaches an
  Escape handler to the page-wide KeyboardListeners; every way of closing the
  modal (close button, backdrop click, Escape, host dismissal) detaches it
  again, so closed modals never leave a listener behind.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from mealfinder.connectors.base import BaseRecipeSource, MealDBError
from mealfinder.models import Ingredient, MealDetail, MealSummary

logger = logging.getLogger(__name__)

NO_INSTRUCTIONS = "No instructions available."
ESCAPE_KEY = "Escape"

KeyHandler = Callable[[str], None]


def resolve_detail(meal: MealSummary, source: BaseRecipeSource) -> MealSummary:
    """
    Pick the record to show in the detail modal.

    Args:
        meal: The summary behind the clicked card
        source: Recipe source used for lookup_by_id()

    Returns:
        The summary itself when it already has instructions (or has no id to
        look up), otherwise the looked-up MealDetail. Falls back to the
        summary when the lookup finds nothing or fails.
    """
    if meal.has_instructions or not meal.id:
        return meal
    try:
        detail = source.lookup_by_id(meal.id)
    except MealDBError as e:
        logger.warning("Lookup for meal %s failed, showing summary: %s", meal.id, e)
        return meal
    if detail is None:
        logger.debug("Lookup for meal %s returned nothing", meal.id)
        return meal
    return detail


def extract_ingredients(meal: MealSummary) -> List[Ingredient]:
    """
    List the non-blank ingredients of a meal in slot order.

    Summaries carry no ingredient slots and yield an empty list.
    """
    if not isinstance(meal, MealDetail):
        return []
    ingredients = []
    for slot in meal.ingredient_slots:
        ingredient = slot.to_ingredient()
        if ingredient is not None:
            ingredients.append(ingredient)
    return ingredients


@dataclass(frozen=True)
class DetailView:
    """Content of the detail modal."""
    title: str
    image_url: str
    tags: Tuple[str, ...]
    ingredients: Tuple[Ingredient, ...]
    instructions: str

    @property
    def ingredient_lines(self) -> List[str]:
        return [ingredient.display() for ingredient in self.ingredients]


def build_detail_view(meal: MealSummary) -> DetailView:
    tags = tuple(tag for tag in (meal.category, meal.area) if tag)
    return DetailView(
        title=meal.name or "",
        image_url=meal.thumbnail or "",
        tags=tags,
        ingredients=tuple(extract_ingredients(meal)),
        instructions=meal.instructions or NO_INSTRUCTIONS,
    )


class KeyboardListeners:
    """Page-wide keydown listeners, dispatched in registration order."""

    def __init__(self) -> None:
        self._handlers: List[KeyHandler] = []

    def add(self, handler: KeyHandler) -> None:
        self._handlers.append(handler)

    def remove(self, handler: KeyHandler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    def dispatch(self, key: str) -> None:
        # Handlers may remove themselves while running
        for handler in list(self._handlers):
            handler(key)

    def __len__(self) -> int:
        return len(self._handlers)


class DismissTrigger(str, enum.Enum):
    CLOSE_BUTTON = "close_button"
    BACKDROP = "backdrop"
    ESCAPE = "escape"
    # Closed by the hosting dialog widget without telling us how
    HOST = "host"


class ModalTarget(str, enum.Enum):
    """Click targets inside the overlay."""
    BACKDROP = "backdrop"
    PANEL = "panel"


class RecipeModal:
    """
    The detail overlay.

    At most one recipe is shown at a time; opening a new one while another is
    open closes the previous one first.
    """

    def __init__(self, keyboard: KeyboardListeners) -> None:
        self.keyboard = keyboard
        self.view: Optional[DetailView] = None
        self.dismissed_by: Optional[DismissTrigger] = None

    @property
    def is_open(self) -> bool:
        return self.view is not None

    def open(self, view: DetailView) -> None:
        if self.is_open:
            self.dismiss(DismissTrigger.HOST)
        self.view = view
        self.dismissed_by = None
        self.keyboard.add(self._on_key)

    def click_close(self) -> bool:
        return self.dismiss(DismissTrigger.CLOSE_BUTTON)

    def click_backdrop(self, target: ModalTarget) -> bool:
        """Close only when the click landed on the backdrop itself, not the panel."""
        if target is not ModalTarget.BACKDROP:
            return False
        return self.dismiss(DismissTrigger.BACKDROP)

    def dismiss(self, trigger: DismissTrigger) -> bool:
        """
        Close the modal and detach its Escape handler.

        Returns:
            True if the modal was open, False if it was already closed.
        """
        if not self.is_open:
            return False
        self.keyboard.remove(self._on_key)
        self.view = None
        self.dismissed_by = trigger
        logger.debug("Recipe modal dismissed via %s", trigger.value)
        return True

    def _on_key(self, key: str) -> None:
        if key == ESCAPE_KEY:
            self.dismiss(DismissTrigger.ESCAPE)
