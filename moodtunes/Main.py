# moodtunes/Main.py
"""Mood-Based Music Finder - Streamlit App"""

import logging
from typing import List

import streamlit as st

from moodtunes.components import render_mood_selector
from moodtunes.config import AppConfig, configure_logging, load_config
from moodtunes.core.controller import PlaylistController, export_playlist_text
from moodtunes.core.fetcher import ITunesFetcher, Track
from moodtunes.services.storage import FavoritesStore, KeyValueStore

logger = logging.getLogger(__name__)

GRID_COLUMNS = 3


@st.cache_resource
def get_fetcher(search_url: str, limit: int, timeout: float) -> ITunesFetcher:
    """Initialize and cache the catalog client"""
    return ITunesFetcher(base_url=search_url, limit=limit, timeout=timeout)


def get_controller(config: AppConfig) -> PlaylistController:
    """One controller per browser session; favorites load when it is created."""
    if "controller" not in st.session_state:
        fetcher = get_fetcher(config.search_url, config.search_limit, config.request_timeout)
        favorites = FavoritesStore(KeyValueStore(config.favorites_path))
        st.session_state.controller = PlaylistController(fetcher, favorites)
        logger.info("Session started with %d favorites", len(st.session_state.controller.favorites))
    return st.session_state.controller


def display_track(controller: PlaylistController, track: Track):
    """Render one track card."""
    with st.container(border=True):
        if track.artwork_url:
            st.image(track.artwork_url, caption=None, width=100)
        st.markdown(f"**🎵 {track.display_title}**")
        st.caption(f"by {track.artist_name}")
        if track.primary_genre_name:
            st.caption(track.primary_genre_name)
        if track.preview_url:
            st.audio(track.preview_url)
        st.button(
            controller.favorite_label(track),
            key=f"fav_{track.track_id}",
            on_click=controller.toggle_favorite,
            args=(track,),
        )


def display_tracks(controller: PlaylistController, tracks: List[Track]):
    """Lay the cards out in a grid."""
    if not tracks:
        if controller.state.show_favorites_only:
            st.info("No favorites yet. Add some from a mood playlist.")
        elif controller.state.selected_mood and not controller.state.error:
            st.info("No songs found for this mood. Try another one.")
        return

    for start in range(0, len(tracks), GRID_COLUMNS):
        row = tracks[start:start + GRID_COLUMNS]
        for column, track in zip(st.columns(GRID_COLUMNS), row):
            with column:
                display_track(controller, track)


def main():
    """Main Streamlit application"""
    config = load_config()
    configure_logging(config.log_level)

    st.set_page_config(
        page_title=config.app_title,
        page_icon="🎧",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    controller = get_controller(config)

    st.title(config.app_title)

    # Mood selection; the fetch runs after the row so the spinner sits below it
    chosen: List[str] = []
    render_mood_selector(chosen.append)
    if chosen:
        with st.spinner("Finding songs for your mood..."):
            controller.select_mood(chosen[-1])

    st.button(
        controller.view_toggle_label(),
        key="toggle_favorites",
        on_click=controller.toggle_favorites_view,
    )

    if controller.state.error:
        st.error(controller.state.error)

    # Playlist header
    col1, col2 = st.columns([4, 1])
    with col1:
        st.header(controller.heading())
    with col2:
        if controller.can_shuffle():
            st.button("🔀 Shuffle", key="shuffle", on_click=controller.shuffle)

    tracks = controller.tracks_to_display()
    display_tracks(controller, tracks)

    if tracks:
        with st.expander("💾 Export Playlist"):
            st.download_button(
                label="📄 Download as Text",
                data=export_playlist_text(controller.heading(), tracks),
                file_name="my_playlist.txt",
                mime="text/plain",
            )

    with st.sidebar:
        st.header("About")
        st.markdown(
            """
        Pick a mood and get matching songs from the iTunes catalog.

        - Preview tracks right in the page
        - Save favorites; they are kept between sessions
        - Shuffle the current mood playlist
        """
        )

        if config.debug:
            st.header("Debug Info")
            st.caption(f"Favorites file: {config.favorites_path}")
            st.caption(f"Search limit: {config.search_limit}")
            st.caption(f"Favorites: {len(controller.favorites)}")

    st.markdown("---")
    st.caption(f"Built with Streamlit • Powered by the iTunes Search API • v{config.app_version}")


if __name__ == "__main__":
    main()
