"""Configuration management for taskmatrix."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

TASKMATRIX_HOME = Path(os.environ.get("TASKMATRIX_HOME", Path.home() / "taskmatrix"))
CONFIG_FILE = TASKMATRIX_HOME / "config" / "taskmatrix.conf"
DATA_DIR = TASKMATRIX_HOME / "data"


@dataclass
class Config:
    """taskmatrix configuration."""

    tasks_file: str = ""
    api_base_url: str = ""
    api_token: str = ""
    timezone: str = "UTC"
    my_day_limit: int = 5
    journal_dir: str = ""


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from unquoted values."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from taskmatrix.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "tasks_file":
                config.tasks_file = value
            case "api_base_url":
                config.api_base_url = value
            case "api_token":
                config.api_token = value
            case "timezone":
                config.timezone = value
            case "my_day_limit":
                try:
                    config.my_day_limit = int(value)
                except ValueError:
                    logger.warning(f"Ignoring invalid MY_DAY_LIMIT: {value!r}")
            case "journal_dir":
                config.journal_dir = value

    return config
