"""Service layer for durable storage"""

from .storage import FAVORITES_KEY, FavoritesStore, KeyValueStore

__all__ = [
    "FAVORITES_KEY",
    "FavoritesStore",
    "KeyValueStore",
]
