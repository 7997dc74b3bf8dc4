"""
Configuration for the tour client.

Settings come from environment variables, optionally read from a .env file
in the working directory:

    GOTOUR_BASE_URL       backend serving /_/fmt and /tour/eng/lesson/
    GOTOUR_STORE_PATH     SQLite file for local edits and preferences
    GOTOUR_LANG           translation catalog to load
    GOTOUR_HTTP_TIMEOUT   request timeout in seconds
    GOTOUR_GO_VERSION     go directive of the synthetic go.mod
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


DEFAULT_BASE_URL = "http://localhost:3999"
DEFAULT_STORE_DIR = Path.home() / ".gotour"
DEFAULT_STORE_PATH = DEFAULT_STORE_DIR / "storage.db"
DEFAULT_LANG = "eng"
DEFAULT_HTTP_TIMEOUT = 10.0
DEFAULT_GO_VERSION = "1.24.0"


@dataclass(frozen=True)
class TourSettings:
    base_url: str = DEFAULT_BASE_URL
    store_path: Path = DEFAULT_STORE_PATH
    lang: str = DEFAULT_LANG
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    go_version: str = DEFAULT_GO_VERSION


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.environ.get(name, default))
    except ValueError:
        return default


def load_settings(env_file: Path | None = None) -> TourSettings:
    """
    Build settings from the environment.

    Args:
        env_file: Optional .env file; values already in the environment win

    Returns:
        TourSettings with defaults for anything unset
    """
    load_dotenv(env_file)

    store_path = os.environ.get("GOTOUR_STORE_PATH")
    return TourSettings(
        base_url=os.environ.get("GOTOUR_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        store_path=Path(store_path).expanduser() if store_path else DEFAULT_STORE_PATH,
        lang=os.environ.get("GOTOUR_LANG", DEFAULT_LANG),
        http_timeout=_float_env("GOTOUR_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
        go_version=os.environ.get("GOTOUR_GO_VERSION", DEFAULT_GO_VERSION),
    )
