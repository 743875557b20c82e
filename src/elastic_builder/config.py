"""Configuration loaded from environment variables."""

import os

from dotenv import load_dotenv

load_dotenv(override=False)

DEFAULT_URL = "http://localhost:9200"
DEFAULT_TIMEOUT = 30.0


def _parse_float(key: str, default: float) -> float:
    """Parse a positive float from environment."""
    raw = os.environ.get(key)
    if raw is None:
        return default
    try:
        value = float(raw)
        return value if value > 0 else default
    except ValueError:
        return default


def _parse_bool(key: str, default: bool) -> bool:
    """Parse a boolean from environment (true/false, 1/0)."""
    raw = os.environ.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in ("true", "1", "yes")


class Settings:
    """Connection and diagnostics settings (ELASTIC_*)."""

    def __init__(self):
        self.url = (os.environ.get("ELASTIC_URL") or DEFAULT_URL).rstrip("/")
        self.timeout = _parse_float("ELASTIC_TIMEOUT", DEFAULT_TIMEOUT)
        self.debug = _parse_bool("ELASTIC_DEBUG", False)
        self.pretty = _parse_bool("ELASTIC_PRETTY", False)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get singleton settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
