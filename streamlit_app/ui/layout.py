"""
Layout primitives for consistent page structure.

Provides the page header and the HTML snippets for recipe cards and tag pills.
All meal text coming from the API is HTML-escaped before it is embedded.
"""

from html import escape
from typing import Iterable, Optional
import streamlit as st


def page_header(title: str, subtitle: Optional[str] = None) -> None:
    """
    Render a consistent page header with title and optional subtitle.

    Args:
        title: Main page title
        subtitle: Optional subtitle/description text
    """
    st.markdown('<div class="mf-page-header">', unsafe_allow_html=True)
    st.markdown(f"# {title}")
    if subtitle:
        st.markdown(f'<div class="subtitle">{subtitle}</div>', unsafe_allow_html=True)
    st.markdown('</div>', unsafe_allow_html=True)


def tag_pills(tags: Iterable[str]) -> str:
    """
    Create HTML for a row of tag pills (category, area).

    Returns:
        HTML string, empty when there are no tags
    """
    pills = "".join(f'<span class="mf-tag">{escape(tag)}</span>' for tag in tags)
    return f'<div class="mf-meta">{pills}</div>' if pills else ""


def recipe_card_html(title: str, image_url: str, tags: Iterable[str], preview: str) -> str:
    """
    Build the static part of a recipe card (everything except its button).

    Args:
        title: Meal name
        image_url: Thumbnail URL (may be empty)
        tags: Category/area tags
        preview: Truncated instructions preview
    """
    image = (
        f'<div class="media"><img src="{escape(image_url, quote=True)}" alt="{escape(title, quote=True)}"></div>'
        if image_url
        else ""
    )
    return (
        '<div class="mf-card">'
        f"{image}"
        f"<h3>{escape(title)}</h3>"
        f"{tag_pills(tags)}"
        f"<p>{escape(preview)}</p>"
        "</div>"
    )
