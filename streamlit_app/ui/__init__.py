"""
UI Styling and Components Module.

This module provides global CSS styling, layout helpers and the page
components for the Meal Finder Streamlit app.
"""

from ui.styles import load_global_styles
from ui.layout import page_header, tag_pills, recipe_card_html

__all__ = [
    "load_global_styles",
    "page_header",
    "tag_pills",
    "recipe_card_html",
]
