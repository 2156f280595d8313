"""Shared workflow layer between the CLI and the adapters.

Resolves task sources, the journal and "now" from configuration so the pure
core functions can be called with explicit inputs.
"""

import logging
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .adapters.file_journal import FileJournalStore
from .adapters.json_file import JsonFileTaskRepository
from .adapters.rest_api import ApiTaskRepository
from .config import DATA_DIR, TASKMATRIX_HOME, Config
from .core.planning import DailyPlan
from .core.report import format_plan
from .ports.journal_store import JournalStore
from .ports.task_repo import TaskRepository, TaskSourceError

logger = logging.getLogger(__name__)

PLAN_SECTION = "Daily Plan"


def get_repository(config: Config, tasks_file: str | None = None) -> TaskRepository:
    """Pick a task source: explicit file, configured file, then the API."""
    if tasks_file:
        return JsonFileTaskRepository(tasks_file)
    if config.tasks_file:
        return JsonFileTaskRepository(config.tasks_file)
    if config.api_base_url:
        return ApiTaskRepository(config.api_base_url, token=config.api_token)

    default_file = DATA_DIR / "tasks.json"
    if default_file.exists():
        return JsonFileTaskRepository(default_file)

    raise TaskSourceError(
        "No task source configured. Set TASKS_FILE or API_BASE_URL in taskmatrix.conf, or pass --file"
    )


def get_journal(config: Config) -> FileJournalStore:
    """Resolve journal directory from config."""
    if config.journal_dir:
        return FileJournalStore(Path(config.journal_dir).expanduser())
    return FileJournalStore(TASKMATRIX_HOME / "journal" / "daily")


def get_timezone(config: Config) -> ZoneInfo:
    try:
        return ZoneInfo(config.timezone)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Unknown TIMEZONE {config.timezone!r}, using UTC")
        return ZoneInfo("UTC")


def resolve_now(config: Config, as_of: str | None = None) -> datetime:
    """Current time in the configured zone, or a parsed --as-of override."""
    tz = get_timezone(config)
    if not as_of:
        return datetime.now(tz)

    parsed = datetime.fromisoformat(as_of)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed


def save_plan(
    config: Config,
    plan: DailyPlan,
    as_of: datetime,
    journal: JournalStore | None = None,
) -> Path | None:
    """Append a daily plan to the journal entry for as_of's date.

    Returns the journal file path when writing to the default file-based journal.
    """
    if journal is not None:
        journal.append(as_of.date(), PLAN_SECTION, format_plan(plan, as_of))
        return None

    store = get_journal(config)
    store.append(as_of.date(), PLAN_SECTION, format_plan(plan, as_of))
    return store.journal_dir / f"{as_of.date().isoformat()}.md"
