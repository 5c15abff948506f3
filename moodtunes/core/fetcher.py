"""iTunes catalog search client"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base exception for catalog search errors."""

    pass


class CatalogRequestError(CatalogError):
    """The request never produced a response (DNS, timeout, connection)."""

    pass


class CatalogResponseError(CatalogError):
    """The catalog answered with a non-success status or an unusable body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


@dataclass(frozen=True)
class Track:
    track_id: int
    track_name: str
    artist_name: str
    artwork_url: str = ""
    preview_url: Optional[str] = None
    primary_genre_name: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Track":
        """Create a Track from an iTunes search result (or a stored favorite)."""
        return cls(
            track_id=int(data["trackId"]),
            track_name=str(data.get("trackName") or ""),
            artist_name=str(data.get("artistName") or ""),
            artwork_url=str(data.get("artworkUrl100") or ""),
            preview_url=data.get("previewUrl") or None,
            primary_genre_name=data.get("primaryGenreName") or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize back to the catalog's field names."""
        data: Dict[str, Any] = {
            "trackId": self.track_id,
            "trackName": self.track_name,
            "artistName": self.artist_name,
            "artworkUrl100": self.artwork_url,
        }
        if self.preview_url:
            data["previewUrl"] = self.preview_url
        if self.primary_genre_name:
            data["primaryGenreName"] = self.primary_genre_name
        return data

    @property
    def display_title(self) -> str:
        return self.track_name.strip() or "Untitled Track"


def parse_results(payload: Any) -> List[Track]:
    """Turn a search response body into tracks, one per trackId."""
    if not isinstance(payload, dict) or not isinstance(payload.get("results"), list):
        raise CatalogResponseError("Unexpected search response format: missing 'results' array")

    tracks: List[Track] = []
    seen = set()
    for record in payload["results"]:
        if not isinstance(record, dict) or record.get("trackId") is None:
            logger.debug("Skipping result without trackId: %r", record)
            continue
        try:
            track = Track.from_api(record)
        except (TypeError, ValueError, OverflowError) as e:
            logger.debug("Skipping unparseable result %r: %s", record, e)
            continue
        if track.track_id in seen:
            continue
        seen.add(track.track_id)
        tracks.append(track)
    return tracks


class ITunesFetcher:
    """Search the public iTunes catalog for music tracks"""

    BASE_URL = "https://itunes.apple.com/search"

    def __init__(
        self,
        base_url: str = BASE_URL,
        limit: int = 12,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url
        self.limit = limit
        self.timeout = timeout
        self._transport = transport

    def build_params(self, term: str) -> Dict[str, Any]:
        return {"term": term, "media": "music", "limit": self.limit}

    def search(self, term: str) -> List[Track]:
        """Run one search request and return the parsed tracks."""
        params = self.build_params(term)
        logger.info("Searching catalog for %r (limit=%d)", term, self.limit)

        try:
            with httpx.Client(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = client.get(self.base_url, params=params)
        except httpx.HTTPError as e:
            raise CatalogRequestError(f"Search request failed: {e}") from e

        if not response.is_success:
            raise CatalogResponseError(
                f"Search failed with HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise CatalogResponseError(f"Search response is not valid JSON: {e}") from e

        tracks = parse_results(payload)
        logger.info("Catalog returned %d tracks for %r", len(tracks), term)
        return tracks
