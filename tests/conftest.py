"""Shared fixtures for moodtunes tests.

- Factory fixtures: track records and Track objects
- Fakes: an in-memory searcher and favorites backend for controller tests
- Storage fixtures: file-backed stores in a temporary directory
"""

from typing import Any, Callable, Dict, List, Optional

import pytest

from moodtunes.core.fetcher import CatalogError, Track
from moodtunes.services.storage import FavoritesStore, KeyValueStore


def track_record(track_id: int, **overrides: Any) -> Dict[str, Any]:
    record = {
        "wrapperType": "track",
        "kind": "song",
        "trackId": track_id,
        "trackName": f"Song {track_id}",
        "artistName": f"Artist {track_id}",
        "artworkUrl100": f"https://example.com/art/{track_id}.jpg",
        "previewUrl": f"https://example.com/preview/{track_id}.m4a",
        "primaryGenreName": "Pop",
    }
    record.update(overrides)
    return record


class FakeSearcher:
    """Records search terms and returns canned tracks or raises."""

    def __init__(self, tracks: Optional[List[Track]] = None, error: Optional[Exception] = None):
        self.tracks = tracks or []
        self.error = error
        self.terms: List[str] = []
        self.on_search: Optional[Callable[[str], None]] = None

    def search(self, term: str) -> List[Track]:
        self.terms.append(term)
        if self.on_search:
            self.on_search(term)
        if self.error:
            raise self.error
        return list(self.tracks)


class MemoryFavorites:
    def __init__(self, initial: Optional[List[Track]] = None):
        self.saved: List[Track] = list(initial or [])
        self.save_calls = 0

    def load(self) -> List[Track]:
        return list(self.saved)

    def save(self, favorites: List[Track]) -> None:
        self.save_calls += 1
        self.saved = list(favorites)


@pytest.fixture
def make_track() -> Callable[..., Track]:
    def _make(track_id: int, **overrides: Any) -> Track:
        return Track.from_api(track_record(track_id, **overrides))

    return _make


@pytest.fixture
def searcher() -> FakeSearcher:
    return FakeSearcher()


@pytest.fixture
def failing_searcher() -> FakeSearcher:
    return FakeSearcher(error=CatalogError("Search failed with HTTP 500"))


@pytest.fixture
def memory_favorites() -> MemoryFavorites:
    return MemoryFavorites()


@pytest.fixture
def kv_store(tmp_path) -> KeyValueStore:
    return KeyValueStore(tmp_path / "storage.json")


@pytest.fixture
def favorites_store(kv_store: KeyValueStore) -> FavoritesStore:
    return FavoritesStore(kv_store)
