"""Tests for configuration loading."""

import logging

from taskmatrix.config import Config, load_config


def test_missing_file_gives_defaults(tmp_path):
    assert load_config(tmp_path / "missing.conf") == Config()


def test_parses_keys(tmp_path):
    path = tmp_path / "taskmatrix.conf"
    path.write_text(
        "\n".join(
            [
                "# task source",
                'TASKS_FILE="~/tasks.json"  # exported from the app',
                "API_BASE_URL=http://localhost:3000/api # local dev",
                "API_TOKEN='abc#123'",
                "TIMEZONE=America/Toronto",
                "MY_DAY_LIMIT=3",
                "JOURNAL_DIR=/tmp/journal",
                "not a setting",
                "UNKNOWN_KEY=ignored",
            ]
        )
    )

    config = load_config(path)

    assert config.tasks_file == "~/tasks.json"
    assert config.api_base_url == "http://localhost:3000/api"
    assert config.api_token == "abc#123"
    assert config.timezone == "America/Toronto"
    assert config.my_day_limit == 3
    assert config.journal_dir == "/tmp/journal"


def test_invalid_limit_is_ignored(tmp_path, caplog):
    path = tmp_path / "taskmatrix.conf"
    path.write_text("MY_DAY_LIMIT=lots\n")

    with caplog.at_level(logging.WARNING):
        config = load_config(path)

    assert config.my_day_limit == 5
    assert "MY_DAY_LIMIT" in caplog.text
