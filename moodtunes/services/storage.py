"""Durable key-value storage and the favorites list kept in it"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, List, Optional, Union

from moodtunes.core.fetcher import Track

logger = logging.getLogger(__name__)

FAVORITES_KEY = "favoriteSongs"

# Streamlit runs every session on its own thread; all stores share this lock
_storage_lock = threading.Lock()


class KeyValueStore:
    """JSON file mapping string keys to string values.

    Each value is opaque text (callers store JSON documents in it). The whole
    file is read on every lookup and replaced on every write. Writes go to a
    temporary file that is then moved over the old one, so a reader sees
    either the previous or the new contents, never a partial file.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable storage file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring storage file %s: expected a JSON object", self.path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def get_item(self, key: str) -> Optional[str]:
        with _storage_lock:
            return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        with _storage_lock:
            data = self._read_all()
            data[key] = value
            self._write_all(data)


class FavoritesStore:
    """Loads and saves the favorites array under a single storage key"""

    def __init__(self, store: KeyValueStore, key: str = FAVORITES_KEY):
        self.store = store
        self.key = key

    def load(self) -> List[Track]:
        saved = self.store.get_item(self.key)
        if not saved:
            return []

        try:
            records = json.loads(saved)
        except ValueError as e:
            logger.warning("Stored favorites are not valid JSON, starting empty: %s", e)
            return []
        if not isinstance(records, list):
            logger.warning("Stored favorites are not a list, starting empty")
            return []

        favorites: List[Track] = []
        seen = set()
        for record in records:
            try:
                track = Track.from_api(record)
            except (KeyError, TypeError, ValueError, OverflowError):
                logger.warning("Dropping malformed stored favorite: %r", record)
                continue
            if track.track_id not in seen:
                seen.add(track.track_id)
                favorites.append(track)
        logger.debug("Loaded %d favorites from %s", len(favorites), self.store.path)
        return favorites

    def save(self, favorites: List[Track]) -> None:
        self.store.set_item(
            self.key,
            json.dumps([t.to_dict() for t in favorites], ensure_ascii=False),
        )
