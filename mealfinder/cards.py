"""
Recipe card rendering.

Turns meal summaries into RecipeCard view models and keeps the single result
container that the page displays. The container is always in exactly one
state (loading, cards, empty or error) and every render replaces whatever was
shown before; there is no diffing.
"""

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from mealfinder.categories import CategorySelection, selected_category_name
from mealfinder.models import MealSummary

PREVIEW_LIMIT = 120
ELLIPSIS = "..."
GET_RECIPE_LABEL = "Get Recipe"

LOADING_MESSAGE = "Fetching dishes..."
EMPTY_MESSAGE = "No recipes found. Try another search or category."
ERROR_MESSAGE = "Failed to fetch recipes. Please try again later."


def truncate_preview(text: Optional[str], limit: int = PREVIEW_LIMIT) -> str:
    """
    Shorten instructions text for a card preview.

    Examples:
        >>> truncate_preview("Boil water.")
        'Boil water.'
        >>> truncate_preview("x" * 121) == "x" * 120 + "..."
        True
    """
    if not text:
        return ""
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


@dataclass(frozen=True)
class RecipeCard:
    """One result card: image, title, tags, preview and its action button."""
    meal: MealSummary
    title: str
    image_url: str
    tags: Tuple[str, ...]
    preview: str
    action_label: str = GET_RECIPE_LABEL


def build_card(meal: MealSummary, selection: CategorySelection) -> RecipeCard:
    """
    Build the card for one meal.

    The category tag falls back to the selected category when the record has
    none (filter.php results never carry one).
    """
    category = meal.category or selected_category_name(selection) or ""
    tags = tuple(tag for tag in (category, meal.area or "") if tag)
    return RecipeCard(
        meal=meal,
        title=meal.name or "",
        image_url=meal.thumbnail or "",
        tags=tags,
        preview=truncate_preview(meal.instructions),
    )


class ContainerStatus(str, enum.Enum):
    LOADING = "loading"
    CARDS = "cards"
    EMPTY = "empty"
    ERROR = "error"


@dataclass
class RecipeContainer:
    """The result area of the page."""
    status: ContainerStatus = ContainerStatus.LOADING
    cards: List[RecipeCard] = field(default_factory=list)
    message: Optional[str] = LOADING_MESSAGE

    def show_loading(self) -> None:
        self._replace(ContainerStatus.LOADING, [], LOADING_MESSAGE)

    def show_empty(self) -> None:
        self._replace(ContainerStatus.EMPTY, [], EMPTY_MESSAGE)

    def show_error(self) -> None:
        self._replace(ContainerStatus.ERROR, [], ERROR_MESSAGE)

    def render_cards(self, meals: Sequence[MealSummary], selection: CategorySelection) -> List[RecipeCard]:
        """
        Replace the container content with one card per meal.

        An empty sequence shows the "no results" message instead.

        Returns:
            The cards now displayed.
        """
        if not meals:
            self.show_empty()
            return self.cards
        self._replace(ContainerStatus.CARDS, [build_card(meal, selection) for meal in meals], None)
        return self.cards

    def _replace(self, status: ContainerStatus, cards: List[RecipeCard], message: Optional[str]) -> None:
        self.status = status
        self.cards = cards
        self.message = message
