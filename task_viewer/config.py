"""
Settings for the relay and viewer processes.

Values come from environment variables, with an optional .env file
loaded first. The Notion token and database id are fixed configuration,
never taken from a request.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_STATUSES = ["Not started", "In progress", "Done"]


def _env(name: str, default: str = "") -> str:
    value = os.getenv(name)
    return default if value is None else value


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [part.strip() for part in raw.split(",") if part.strip()]


def _env_path(name: str, default: str) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return Path(default)
    return Path(raw).expanduser()


@dataclass
class Settings:
    # Notion (relay side)
    notion_token: str = ""
    notion_database_id: str = ""
    notion_version: str = "2022-06-28"
    notion_api_base: str = "https://api.notion.com/v1"

    # Relay server
    relay_host: str = "127.0.0.1"
    relay_port: int = 3000

    # Viewer server
    relay_url: str = "http://localhost:3000/api/tasks"
    viewer_host: str = "127.0.0.1"
    viewer_port: int = 5000
    statuses: List[str] = field(default_factory=lambda: list(DEFAULT_STATUSES))

    # Local state + logs
    state_dir: Path = Path(".local/task_viewer")
    log_dir: Path = Path(".local/task_viewer/logs")
    log_level: str = "INFO"

    # None means wait forever
    http_timeout: Optional[float] = None

    @property
    def theme_file(self) -> Path:
        return self.state_dir / "theme.json"


def load_settings(dotenv: bool = True) -> Settings:
    """Build Settings from the environment (and .env, unless disabled)."""
    if dotenv:
        load_dotenv(override=False)

    return Settings(
        notion_token=_env("NOTION_TOKEN"),
        notion_database_id=_env("NOTION_DATABASE_ID"),
        notion_version=_env("NOTION_VERSION", "2022-06-28"),
        notion_api_base=_env("NOTION_API_BASE", "https://api.notion.com/v1"),
        relay_host=_env("RELAY_HOST", "127.0.0.1"),
        relay_port=_env_int("RELAY_PORT", 3000),
        relay_url=_env("TASK_VIEWER_RELAY_URL", "http://localhost:3000/api/tasks"),
        viewer_host=_env("VIEWER_HOST", "127.0.0.1"),
        viewer_port=_env_int("VIEWER_PORT", 5000),
        statuses=_env_list("TASK_VIEWER_STATUSES", DEFAULT_STATUSES),
        state_dir=_env_path("TASK_VIEWER_STATE_DIR", ".local/task_viewer"),
        log_dir=_env_path("TASK_VIEWER_LOG_DIR", ".local/task_viewer/logs"),
        log_level=_env("TASK_VIEWER_LOG_LEVEL", "INFO").upper(),
        http_timeout=_env_float("HTTP_TIMEOUT"),
    )
