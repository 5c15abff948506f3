"""Application configuration from environment variables and .env"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_FAVORITES_PATH = Path.home() / ".moodtunes" / "storage.json"


@dataclass
class AppConfig:
    app_title: str = "🎧 Mood-Based Music Finder"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    search_url: str = "https://itunes.apple.com/search"
    search_limit: int = 12
    request_timeout: float = 10.0
    favorites_path: Path = DEFAULT_FAVORITES_PATH


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using %d", name, raw, default)
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using %s", name, raw, default)
        return default


def load_config() -> AppConfig:
    """Read configuration, letting a local .env fill in unset variables."""
    load_dotenv()

    debug = os.getenv("DEBUG", "false").lower() == "true"
    return AppConfig(
        app_title=os.getenv("APP_TITLE", AppConfig.app_title),
        app_version=os.getenv("APP_VERSION", AppConfig.app_version),
        debug=debug,
        log_level=os.getenv("LOG_LEVEL", "DEBUG" if debug else "INFO").upper(),
        search_url=os.getenv("ITUNES_SEARCH_URL", AppConfig.search_url),
        search_limit=_env_int("SEARCH_LIMIT", AppConfig.search_limit),
        request_timeout=_env_float("REQUEST_TIMEOUT", AppConfig.request_timeout),
        favorites_path=Path(os.getenv("FAVORITES_PATH", str(DEFAULT_FAVORITES_PATH))).expanduser(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
