"""Tests for the click command line."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from taskmatrix.cli import main
from taskmatrix.config import Config

AS_OF = "2025-01-15T10:00:00+00:00"


@pytest.fixture
def config(tmp_path):
    return Config(timezone="UTC", journal_dir=str(tmp_path / "journal"))


@pytest.fixture
def runner(config):
    with patch("taskmatrix.cli.load_config", return_value=config):
        yield CliRunner()


@pytest.fixture
def tasks_file(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text(
        json.dumps(
            [
                {"id": "1", "title": "Walk dog", "important": True, "urgent": True},
                {"id": "2", "title": "Plan trip", "important": True, "dueDate": "2025-01-18T10:00:00Z"},
                {"id": "3", "title": "Sort photos"},
                {"id": "4", "title": "Pay bills", "urgent": True},
                {"id": "5", "title": "Old chore", "completed": True},
                {"id": "6", "title": "Book flights", "eisenhowerQuadrant": "do"},
            ]
        )
    )
    return str(path)


def run(runner, *args):
    return runner.invoke(main, list(args), catch_exceptions=False)


class TestClassify:
    def test_json(self, runner, tasks_file):
        result = run(runner, "classify", "--file", tasks_file, "--as-of", AS_OF, "--json")
        assert result.exit_code == 0
        data = {item["id"]: item for item in json.loads(result.output)}

        assert set(data) == {"1", "2", "3", "4", "6"}
        assert data["1"]["quadrant"] == "do"
        assert data["2"]["quadrant"] == "decide"
        assert data["3"]["quadrant"] == "delete"
        assert data["4"]["quadrant"] == "delegate"
        assert data["6"] == {"id": "6", "title": "Book flights", "due_date": None, "quadrant": "do", "source": "manual"}

    def test_text_groups_by_quadrant(self, runner, tasks_file):
        result = run(runner, "classify", "--file", tasks_file, "--as-of", AS_OF)
        assert result.exit_code == 0
        assert "### Do (2)" in result.output
        assert "- [Do] Book flights *" in result.output
        assert "### Schedule (1)" in result.output


class TestAnalyze:
    def test_json(self, runner, tasks_file):
        result = run(runner, "analyze", "--file", tasks_file, "--as-of", AS_OF, "--json")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["distribution"] == {"do": 2, "decide": 1, "delegate": 1, "delete": 1}
        # 40% Do is not yet crisis mode, but 60% of the list is urgent
        assert data["insights"] == ["📢 You're in reactive mode - most tasks are urgent"]

    def test_text(self, runner, tasks_file):
        result = run(runner, "analyze", "--file", tasks_file, "--as-of", AS_OF)
        assert "### Distribution" in result.output
        assert "- Do: 2 (40%)" in result.output


def test_score(runner, tasks_file):
    result = run(runner, "score", "--file", tasks_file, "--as-of", AS_OF, "--json")
    data = json.loads(result.output)
    assert set(data) == {"score", "grade", "feedback"}
    assert 0 <= data["score"] <= 100


class TestSuggest:
    def test_uses_configured_limit(self, runner, tasks_file, config):
        config.my_day_limit = 2
        result = run(runner, "suggest", "--file", tasks_file, "--as-of", AS_OF, "--json")
        data = json.loads(result.output)
        assert [t["id"] for t in data] == ["1", "6"]

    def test_limit_option(self, runner, tasks_file):
        result = run(runner, "suggest", "--file", tasks_file, "--as-of", AS_OF, "--limit", "5", "--json")
        assert [t["id"] for t in json.loads(result.output)] == ["1", "6", "2"]

    def test_nothing_to_suggest(self, runner, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("[]")
        result = run(runner, "suggest", "--file", str(path), "--as-of", AS_OF)
        assert "Nothing to add to My Day." in result.output


class TestPlan:
    def test_text(self, runner, tasks_file):
        result = run(runner, "plan", "--file", tasks_file, "--as-of", AS_OF)
        assert result.exit_code == 0
        assert "### Morning" in result.output
        assert "### Suggestions" in result.output

    def test_save_writes_journal(self, runner, tasks_file, tmp_path):
        result = run(runner, "plan", "--file", tasks_file, "--as-of", AS_OF, "--save")
        assert result.exit_code == 0
        journal_file = tmp_path / "journal" / "2025-01-15.md"
        assert journal_file.exists()
        assert "## Daily Plan" in journal_file.read_text()
        assert "Plan saved to" in result.output


def test_estimate(runner, tasks_file):
    result = run(runner, "estimate", "--file", tasks_file, "--as-of", AS_OF, "--json")
    data = json.loads(result.output)
    assert data["do"]["total_tasks"] == 2
    assert data["do"]["estimated_hours"] == 2.5
    assert data["delete"]["recommendation"] == "Consider eliminating these low-value tasks"


def test_guide(runner):
    result = run(runner, "guide", "decide")
    assert result.exit_code == 0
    assert result.output.startswith("Schedule (Prevention & Planning)")
    assert "- Schedule dedicated time blocks" in result.output


class TestErrors:
    def test_missing_file(self, runner, tmp_path):
        result = run(runner, "analyze", "--file", str(tmp_path / "nope.json"))
        assert result.exit_code == 1
        assert "Error: Tasks file not found" in result.output

    def test_undecodable_file(self, runner, tmp_path):
        path = tmp_path / "tasks.json"
        path.write_bytes(b'[{"title": "caf\xe9"}]')
        result = run(runner, "analyze", "--file", str(path))
        assert result.exit_code == 1
        assert "Error: Could not read" in result.output

    def test_directory_as_file(self, runner, tmp_path):
        result = run(runner, "analyze", "--file", str(tmp_path))
        assert result.exit_code == 1
        assert "Error: Could not read" in result.output

    def test_null_title(self, runner, tmp_path):
        path = tmp_path / "tasks.json"
        path.write_text('[{"title": null}]')
        result = run(runner, "classify", "--file", str(path))
        assert result.exit_code == 1
        assert "Error: Malformed task #0" in result.output

    def test_bad_as_of(self, runner, tasks_file):
        result = run(runner, "analyze", "--file", tasks_file, "--as-of", "yesterday")
        assert result.exit_code == 1
        assert "invalid --as-of" in result.output

    def test_unknown_quadrant(self, runner):
        result = runner.invoke(main, ["guide", "later"])
        assert result.exit_code == 2
