"""Adapters - I/O implementations of ports."""

from .json_file import JsonFileTaskRepository
from .rest_api import ApiTaskRepository
from .file_journal import FileJournalStore

__all__ = [
    "JsonFileTaskRepository",
    "ApiTaskRepository",
    "FileJournalStore",
]
