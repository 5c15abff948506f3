"""Playlist state and the operations that change it"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Protocol

from moodtunes.core.fetcher import CatalogError, Track
from moodtunes.core.mood import search_term_for

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Something went wrong while fetching songs. Please try again."


class TrackSearcher(Protocol):
    def search(self, term: str) -> List[Track]: ...


class FavoritesBackend(Protocol):
    def load(self) -> List[Track]: ...

    def save(self, favorites: List[Track]) -> None: ...


@dataclass
class ViewState:
    selected_mood: str = ""
    is_loading: bool = False
    error: Optional[str] = None
    show_favorites_only: bool = False


class PlaylistController:
    """Owns the playlist, favorites and view state for one session.

    Favorites are loaded from the backend once, on construction, and written
    back in full after every change. Each fetch is tagged with a request id;
    only the most recently issued request may update the playlist.
    """

    def __init__(self, searcher: TrackSearcher, favorites_backend: FavoritesBackend):
        self.searcher = searcher
        self.favorites_backend = favorites_backend
        self.state = ViewState()
        self.playlist: List[Track] = []
        self.favorites: List[Track] = favorites_backend.load()
        self._latest_request_id = 0

    # -- mood / fetch -----------------------------------------------------

    def select_mood(self, mood: str) -> None:
        self.state.selected_mood = mood
        self.state.show_favorites_only = False
        self.fetch_songs(mood)

    def fetch_songs(self, mood: str) -> None:
        request_id = self.begin_fetch()
        term = search_term_for(mood)
        try:
            tracks = self.searcher.search(term)
        except CatalogError as e:
            self.fail_fetch(request_id, e)
        except Exception as e:
            logger.exception("Unexpected error fetching songs for %r", mood)
            self.fail_fetch(request_id, e)
        else:
            self.complete_fetch(request_id, tracks)

    def begin_fetch(self) -> int:
        """Start a new request, superseding any earlier one."""
        self._latest_request_id += 1
        self.state.is_loading = True
        self.state.error = None
        return self._latest_request_id

    def is_current(self, request_id: int) -> bool:
        return request_id == self._latest_request_id

    def complete_fetch(self, request_id: int, tracks: List[Track]) -> bool:
        if not self.is_current(request_id):
            logger.debug("Dropping stale result for request %d", request_id)
            return False
        self.playlist = list(tracks)
        self.state.is_loading = False
        return True

    def fail_fetch(self, request_id: int, exc: Exception) -> bool:
        if not self.is_current(request_id):
            logger.debug("Dropping stale failure for request %d: %s", request_id, exc)
            return False
        logger.warning("Error fetching songs: %s", exc)
        logger.debug("Fetch failure detail", exc_info=exc)
        # previous playlist stays on screen
        self.state.error = FETCH_ERROR_MESSAGE
        self.state.is_loading = False
        return True

    # -- favorites --------------------------------------------------------

    def is_favorite(self, track: Track) -> bool:
        return any(fav.track_id == track.track_id for fav in self.favorites)

    def toggle_favorite(self, track: Track) -> None:
        if self.is_favorite(track):
            self.favorites = [fav for fav in self.favorites if fav.track_id != track.track_id]
        else:
            self.favorites = [*self.favorites, track]
        self.favorites_backend.save(self.favorites)

    def favorite_label(self, track: Track) -> str:
        return "💖 Remove Favorite" if self.is_favorite(track) else "🤍 Add to Favorites"

    # -- view -------------------------------------------------------------

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        shuffled = list(self.playlist)
        (rng or random).shuffle(shuffled)
        self.playlist = shuffled

    def toggle_favorites_view(self) -> None:
        self.state.show_favorites_only = not self.state.show_favorites_only

    def tracks_to_display(self) -> List[Track]:
        return self.favorites if self.state.show_favorites_only else self.playlist

    def can_shuffle(self) -> bool:
        return not self.state.show_favorites_only and bool(self.state.selected_mood)

    def heading(self) -> str:
        if self.state.show_favorites_only:
            return "⭐ Your Favorite Songs"
        if self.state.selected_mood:
            return f"{self.state.selected_mood} Playlist"
        return "Select a Mood"

    def view_toggle_label(self) -> str:
        return "🎵 Back to Playlist" if self.state.show_favorites_only else "⭐ View Favorites"


def export_playlist_text(heading: str, tracks: List[Track]) -> str:
    """Plain-text export of a track list"""
    lines = [f"# {heading}", ""]
    for i, track in enumerate(tracks, 1):
        line = f"{i}. **{track.display_title}** by {track.artist_name}"
        if track.primary_genre_name:
            line += f" ({track.primary_genre_name})"
        lines.append(line)
    return "\n".join(lines) + "\n"
