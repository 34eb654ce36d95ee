"""
Meal Finder - Streamlit Frontend Main Entry Point.

Run with:
    streamlit run streamlit_app/app.py

Page flow on every rerun:
1. Start the session's RecipeBrowser (categories + default fetch) if needed,
   otherwise run the action queued by the last widget callback
2. Render header, search form, category chips and the result grid
3. Re-open the recipe dialog while the modal is open
"""

import logging
import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows `ui` and `utils` imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import mealfinder without installing it
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code reads environment variables
from mealfinder.config import AppConfig

import streamlit as st

from mealfinder.browser import RecipeBrowser
from mealfinder.cards import LOADING_MESSAGE

from ui.components import render_category_bar, render_results, render_search_form, show_recipe_dialog
from ui.feedback import working_spinner
from ui.layout import page_header
from ui.styles import load_global_styles
from utils.state import (
    ACTION_OPEN_RECIPE,
    ACTION_SEARCH,
    ACTION_SELECT_CATEGORY,
    get_browser,
    pop_action,
)

logging.basicConfig(
    level=AppConfig.get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def run_pending_action(browser: RecipeBrowser) -> None:
    """Start the browser on first run, otherwise run the queued action (if any)."""
    if not browser.started:
        with working_spinner(LOADING_MESSAGE):
            browser.start()
        return

    action = pop_action()
    if action is None:
        return

    name, args = action
    if name == ACTION_SEARCH:
        with working_spinner(LOADING_MESSAGE):
            browser.search(*args)
    elif name == ACTION_SELECT_CATEGORY:
        with working_spinner(LOADING_MESSAGE):
            browser.select_category(*args)
    elif name == ACTION_OPEN_RECIPE:
        with working_spinner("Loading recipe…"):
            browser.open_recipe(*args)
    else:
        logger.warning("Ignoring unknown action %r", name)


# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Meal Finder",
    page_icon="🍲",
    layout="wide",
)

load_global_styles()

browser = get_browser()
run_pending_action(browser)

page_header(
    "Meal Finder",
    subtitle="Search TheMealDB by name or browse by category.",
)

render_search_form()
render_category_bar(browser)

st.divider()

render_results(browser)

if browser.modal.is_open:
    show_recipe_dialog(browser)
