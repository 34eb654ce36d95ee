"""
Recipe browser orchestrator.

RecipeBrowser owns the page state (category bar, result container, detail
modal) and wires user actions to fetches:

- start(): load categories, then run the default fetch
- search(text): fetch using the trimmed text (search button or Enter key)
- select_category(index): activate a chip and fetch with no query text
- open_recipe(index): resolve a card's full record and open the modal

Fetches are not serialized. If two overlap, whichever finishes rendering last
owns the container.
"""

import logging
from typing import Optional

from mealfinder.cards import RecipeContainer
from mealfinder.categories import CategoryBar
from mealfinder.config import MealDBConfig
from mealfinder.connectors.base import BaseRecipeSource
from mealfinder.detail import DetailView, KeyboardListeners, RecipeModal, build_detail_view, resolve_detail
from mealfinder.search import SearchOutcome, SearchStatus, fetch_recipes

logger = logging.getLogger(__name__)


class RecipeBrowser:
    """
    Page-level state and actions for the recipe search UI.

    Args:
        source: Recipe source (usually a MealDBConnector)
        default_query: Term searched when no query and no category is active
        keyboard: Page-wide key listeners shared with the modal
    """

    def __init__(
        self,
        source: BaseRecipeSource,
        default_query: Optional[str] = None,
        keyboard: Optional[KeyboardListeners] = None,
    ) -> None:
        self.source = source
        self.default_query = default_query or MealDBConfig.get_default_query()
        self.categories = CategoryBar()
        self.container = RecipeContainer()
        self.keyboard = keyboard or KeyboardListeners()
        self.modal = RecipeModal(self.keyboard)
        self.started = False
        self.last_outcome: Optional[SearchOutcome] = None

    def start(self) -> SearchOutcome:
        self.started = True
        self.categories.load(self.source)
        return self.fetch()

    def fetch(self, query: str = "") -> SearchOutcome:
        """
        Fetch recipes and render them into the container.

        Args:
            query: Trimmed search text; empty means "use the category filter"
        """
        self.container.show_loading()
        outcome = fetch_recipes(
            self.source,
            query,
            self.categories.selection,
            default_query=self.default_query,
        )
        if outcome.status is SearchStatus.ERROR:
            self.container.show_error()
        else:
            self.container.render_cards(outcome.meals, self.categories.selection)
        self.last_outcome = outcome
        return outcome

    def search(self, raw_text: str) -> SearchOutcome:
        return self.fetch((raw_text or "").strip())

    def select_category(self, index: int) -> SearchOutcome:
        selection = self.categories.select(index)
        logger.debug("Category selected: %r", selection)
        return self.fetch()

    def open_recipe(self, card_index: int) -> DetailView:
        """
        Open the detail modal for the card at card_index.

        Raises:
            IndexError: If no card is displayed at that position.
        """
        card = self.container.cards[card_index]
        meal = resolve_detail(card.meal, self.source)
        view = build_detail_view(meal)
        self.modal.open(view)
        return view
