"""
Page components for the recipe search UI.

Each function renders one region of the page from the RecipeBrowser state:
search form, category chips, result grid and the recipe dialog. Interactive
widgets only queue actions (see utils.state); they never fetch themselves.
"""

from html import escape

import streamlit as st

from mealfinder.browser import RecipeBrowser
from mealfinder.cards import ContainerStatus
from mealfinder.detail import DismissTrigger

from ui.feedback import show_empty_state, show_error
from ui.layout import recipe_card_html, tag_pills
from utils.state import (
    ACTION_OPEN_RECIPE,
    ACTION_SELECT_CATEGORY,
    SEARCH_TEXT_KEY,
    get_browser,
    queue_action,
    queue_search,
)

GRID_COLUMNS = 3


def render_search_form() -> None:
    """
    Render the search field and button.

    Wrapped in a form, so pressing Enter in the field submits exactly like
    clicking the button.
    """
    with st.form("recipe_search_form", border=False):
        input_col, button_col = st.columns([5, 1])
        with input_col:
            st.text_input(
                "Search recipes",
                key=SEARCH_TEXT_KEY,
                placeholder="e.g. arrabiata, curry, pie…",
                label_visibility="collapsed",
            )
        with button_col:
            st.form_submit_button("Search", on_click=queue_search, width="stretch")


def render_category_bar(browser: RecipeBrowser) -> None:
    """Render one chip per category; the active chip uses the primary style."""
    chips = browser.categories.chips
    if not chips:
        # Load failed or returned nothing; the rest of the page still works
        return

    cols = st.columns(min(len(chips), 8))
    for idx, chip in enumerate(chips):
        with cols[idx % len(cols)]:
            st.button(
                chip.label,
                key=f"category_chip_{idx}",
                type="primary" if chip.active else "secondary",
                on_click=queue_action,
                args=(ACTION_SELECT_CATEGORY, idx),
                width="stretch",
            )


def render_results(browser: RecipeBrowser) -> None:
    """Render the result container: cards, the empty message or the error."""
    container = browser.container

    if container.status is ContainerStatus.ERROR:
        show_error(container.message or "")
        return
    if container.status is ContainerStatus.EMPTY:
        show_empty_state(container.message or "")
        return
    if container.status is ContainerStatus.LOADING:
        st.markdown(f'<div class="mf-status">{escape(container.message or "")}</div>', unsafe_allow_html=True)
        return

    cols = st.columns(GRID_COLUMNS, gap="medium")
    for idx, card in enumerate(container.cards):
        with cols[idx % GRID_COLUMNS]:
            st.markdown(
                recipe_card_html(card.title, card.image_url, card.tags, card.preview),
                unsafe_allow_html=True,
            )
            st.button(
                card.action_label,
                key=f"get_recipe_{idx}",
                on_click=queue_action,
                args=(ACTION_OPEN_RECIPE, idx),
                width="stretch",
            )


def _on_recipe_dialog_dismissed() -> None:
    # Escape or a click outside the dialog, reported by Streamlit without detail
    get_browser().modal.dismiss(DismissTrigger.HOST)


@st.dialog("Recipe", width="large", on_dismiss=_on_recipe_dialog_dismissed)
def show_recipe_dialog(browser: RecipeBrowser) -> None:
    """Render the open recipe inside a Streamlit dialog."""
    view = browser.modal.view
    if view is None:
        return

    header_col, close_col = st.columns([5, 1])
    with header_col:
        st.markdown(f"### {escape(view.title)}")
    with close_col:
        if st.button("✕", key="recipe_dialog_close", help="Close"):
            browser.modal.click_close()
            st.rerun()

    image_col, body_col = st.columns([2, 3], gap="large")
    with image_col:
        if view.image_url:
            st.image(view.image_url)
    with body_col:
        st.markdown("#### Details")
        st.markdown(tag_pills(view.tags), unsafe_allow_html=True)

        st.markdown("#### Ingredients")
        if view.ingredient_lines:
            st.markdown("\n".join(f"- {escape(line)}" for line in view.ingredient_lines))
        else:
            st.caption("No ingredients listed.")

        st.markdown("#### Instructions")
        st.markdown(
            f'<div class="mf-instructions">{escape(view.instructions)}</div>',
            unsafe_allow_html=True,
        )
