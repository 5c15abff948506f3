"""Core functionality for mood lookup, catalog search and playlist state"""

from .mood import MOOD_KEYWORDS, MOOD_OPTIONS, MoodOption, search_term_for
from .fetcher import (
    CatalogError,
    CatalogRequestError,
    CatalogResponseError,
    ITunesFetcher,
    Track,
)
from .controller import PlaylistController, ViewState, export_playlist_text

__all__ = [
    "MOOD_KEYWORDS",
    "MOOD_OPTIONS",
    "MoodOption",
    "search_term_for",
    "CatalogError",
    "CatalogRequestError",
    "CatalogResponseError",
    "ITunesFetcher",
    "Track",
    "PlaylistController",
    "ViewState",
    "export_playlist_text",
]
