"""
Global CSS Styling for Meal Finder.

This module provides load_global_styles() to inject consistent styling
across the page: dark page background, category chips, recipe cards and the
small tag pills used on cards and in the recipe dialog.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the Meal Finder app.

    This function:
    - Imports Google Fonts (Nunito) for friendly typography
    - Styles buttons as rounded pills (category chips reuse this)
    - Defines the recipe card, tag pill and status message classes
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;700&display=swap');

        html, body, [class*="css"] {
            font-family: 'Nunito', 'sans serif' !important;
        }

        h1, h2, h3, h4, h5, h6 {
            font-weight: 600 !important;
            letter-spacing: 0.02em !important;
        }

        /* Buttons - rounded pills */
        .stButton > button {
            border-radius: 50px !important;
            font-weight: 600 !important;
            padding: 0.4rem 1.1rem !important;
            transition: all 0.2s ease !important;
        }

        .stButton > button:hover {
            transform: translateY(-1px) !important;
        }

        /* Main app container */
        .main .block-container {
            max-width: 1200px !important;
            padding-top: 1.5rem !important;
            padding-bottom: 2.5rem !important;
        }

        /* Recipe card */
        .mf-card {
            border-radius: 14px !important;
            overflow: hidden !important;
            background-color: #ffffff !important;
            border: 1px solid rgba(230, 81, 0, 0.12) !important;
            margin-bottom: 0.5rem !important;
        }

        .mf-card .media img {
            width: 100%;
            height: 180px;
            object-fit: cover;
            display: block;
        }

        .mf-card h3 {
            font-size: 1.15rem !important;
            margin: 0.75rem 1rem 0.25rem 1rem !important;
        }

        .mf-card p {
            color: #555 !important;
            font-size: 0.9rem !important;
            margin: 0.25rem 1rem 0.75rem 1rem !important;
        }

        /* Tag pills (category / area) */
        .mf-meta {
            margin: 0 1rem;
        }

        .mf-tag {
            display: inline-block;
            padding: 0.2rem 0.7rem;
            border-radius: 50px;
            background: #FFF1E6;
            color: #E65100;
            font-size: 0.75rem;
            font-weight: 600;
            margin: 0 0.25rem 0.25rem 0;
        }

        /* Status message in the result area */
        .mf-status {
            padding: 14px;
            color: #444;
        }

        /* Page header */
        .mf-page-header {
            margin-bottom: 1.25rem !important;
        }

        .mf-page-header .subtitle {
            color: #666 !important;
            font-size: 1rem !important;
        }

        /* Dialog instructions block */
        .mf-instructions {
            white-space: pre-line;
            line-height: 1.6;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
