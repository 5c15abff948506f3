"""Mood options and their search phrases"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True)
class MoodOption:
    value: str   # internal mood name, also the fallback search term
    label: str   # emoji + text shown on the button


MOOD_OPTIONS: Tuple[MoodOption, ...] = (
    MoodOption("Happy", "😊 Happy"),
    MoodOption("Sad", "😢 Sad"),
    MoodOption("Energetic", "💃 Energetic"),
    MoodOption("Chill", "😌 Chill"),
    MoodOption("Focus", "🎯 Focus"),
)

# Preset phrases bias the catalog search towards the mood
MOOD_KEYWORDS: Mapping[str, str] = MappingProxyType({
    "Happy": "feel good upbeat pop",
    "Sad": "melancholy piano ballad",
    "Energetic": "dance workout edm",
    "Chill": "lofi chillhop acoustic",
    "Focus": "instrumental study beats",
})


def search_term_for(mood: str) -> str:
    """Resolve a mood to its search phrase, or the mood itself if unmapped."""
    return MOOD_KEYWORDS.get(mood) or mood
