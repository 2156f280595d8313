"""File-based journal storage adapter."""

from datetime import date
from pathlib import Path


class FileJournalStore:
    """
    File-based journal storage.

    Implements JournalStore protocol. Each day gets a markdown file.
    """

    def __init__(self, journal_dir: Path | str):
        self.journal_dir = Path(journal_dir).expanduser()
        self.journal_dir.mkdir(parents=True, exist_ok=True)

    def _path_for_date(self, target_date: date) -> Path:
        """Get the file path for a given date."""
        return self.journal_dir / f"{target_date.isoformat()}.md"

    def read(self, target_date: date) -> str | None:
        """Read journal content for a date. Returns None if not found."""
        path = self._path_for_date(target_date)
        if not path.exists():
            return None
        return path.read_text()

    def append(self, target_date: date, section_header: str, content: str) -> None:
        """Append a section, separated from any earlier ones."""
        path = self._path_for_date(target_date)

        section = f"## {section_header}\n\n{content}"
        if path.exists():
            section = f"{path.read_text()}\n\n---\n\n{section}"

        path.write_text(section)

    def has_section(self, target_date: date, section_header: str) -> bool:
        """Check if a journal entry contains a specific section."""
        content = self.read(target_date)
        if not content:
            return False
        return f"## {section_header}" in content
