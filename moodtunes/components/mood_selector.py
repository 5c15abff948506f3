"""Row of mood buttons"""

from typing import Callable, Sequence

import streamlit as st

from moodtunes.core.mood import MOOD_OPTIONS, MoodOption


def render_mood_selector(
    on_select: Callable[[str], None],
    options: Sequence[MoodOption] = MOOD_OPTIONS,
) -> None:
    """Render one button per mood; a click reports that mood's value."""
    columns = st.columns(len(options))
    for column, mood in zip(columns, options):
        with column:
            if st.button(mood.label, key=f"mood_{mood.value}", use_container_width=True):
                on_select(mood.value)
