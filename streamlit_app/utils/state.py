"""
Recipe Browser State Management Module.

This module wraps Streamlit's session_state to provide a clean API for the
page state. One RecipeBrowser (category selection, result container, detail
modal) is stored per browser session.

Widget callbacks never fetch directly. They queue a pending action, and the
page script runs it at the top of the next rerun inside a spinner, so the
chips, cards and dialog always render from the updated state.

# NOTE: Everything lives in session_state, so a page refresh starts a new
    session: categories are reloaded and the default fetch runs again.
"""

from typing import Any, Optional, Tuple

import streamlit as st

from mealfinder.browser import RecipeBrowser
from mealfinder.connectors.mealdb_connector import MealDBConnector

# Session state keys
BROWSER_KEY = "recipe_browser"
PENDING_ACTION_KEY = "recipe_pending_action"
SEARCH_TEXT_KEY = "recipe_search_text"

ACTION_SEARCH = "search"
ACTION_SELECT_CATEGORY = "select_category"
ACTION_OPEN_RECIPE = "open_recipe"

PendingAction = Tuple[str, Tuple[Any, ...]]


@st.cache_resource
def get_recipe_source() -> MealDBConnector:
    """Share one connector (and its HTTP session) across reruns."""
    return MealDBConnector()


def get_browser() -> RecipeBrowser:
    """
    Get the RecipeBrowser for this session, creating it on first use.

    Returns:
        The session's RecipeBrowser. start() has not necessarily been called;
        check browser.started.
    """
    if BROWSER_KEY not in st.session_state:
        st.session_state[BROWSER_KEY] = RecipeBrowser(get_recipe_source())
    return st.session_state[BROWSER_KEY]


def queue_action(name: str, *args: Any) -> None:
    """
    Queue an action for the next rerun.

    A newer action replaces an unprocessed older one.
    """
    st.session_state[PENDING_ACTION_KEY] = (name, args)


def queue_search() -> None:
    """Form submit callback: queue a search with the current input text."""
    queue_action(ACTION_SEARCH, st.session_state.get(SEARCH_TEXT_KEY, ""))


def pop_action() -> Optional[PendingAction]:
    return st.session_state.pop(PENDING_ACTION_KEY, None)
