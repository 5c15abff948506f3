"""Streamlit UI components"""

from .mood_selector import render_mood_selector

__all__ = ["render_mood_selector"]
