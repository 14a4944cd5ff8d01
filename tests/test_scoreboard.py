"""Tests for eqpyramid.core.scoreboard – team scores and persistence."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from eqpyramid.core.scoreboard import DEFAULT_STORAGE_KEY, Scoreboard, Team, default_storage_path


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def storage(tmp_path: Path) -> Path:
    return tmp_path / "storage.json"


@pytest.fixture()
def board(storage: Path) -> Scoreboard:
    """Scoreboard backed by a temp file so tests don't touch ~/.eqpyramid."""
    return Scoreboard(file_path=storage)


# ---------------------------------------------------------------------------
# Team dataclass
# ---------------------------------------------------------------------------

class TestTeam:
    def test_default_score(self):
        assert Team("Owls").score == 0

    def test_equality(self):
        assert Team("Owls", 2) == Team("Owls", 2)


# ---------------------------------------------------------------------------
# Storage location
# ---------------------------------------------------------------------------

class TestStoragePath:
    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("EQPYRAMID_HOME", str(tmp_path))
        assert default_storage_path() == tmp_path / "storage.json"

    def test_home_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("EQPYRAMID_HOME", raising=False)
        monkeypatch.setattr(Path, "home", lambda: tmp_path)
        assert default_storage_path() == tmp_path / ".eqpyramid" / "storage.json"


# ---------------------------------------------------------------------------
# Editing teams
# ---------------------------------------------------------------------------

class TestEditing:
    def test_starts_empty(self, board: Scoreboard):
        assert board.teams == []
        assert len(board) == 0

    def test_add_team(self, board: Scoreboard):
        team = board.add_team("Owls")
        assert team == Team("Owls", 0)
        assert board.teams == [Team("Owls", 0)]

    def test_add_trims_name(self, board: Scoreboard):
        board.add_team("  Owls  ")
        assert board.teams[0].name == "Owls"

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_ignored(self, board: Scoreboard, name):
        assert board.add_team(name) is None
        assert board.teams == []

    def test_duplicate_names_allowed(self, board: Scoreboard):
        board.add_team("Owls")
        board.add_team("Owls")
        assert len(board) == 2

    def test_increment_and_decrement(self, board: Scoreboard):
        board.add_team("Owls")
        assert board.increment(0) == 1
        assert board.increment(0) == 2
        assert board.decrement(0) == 1
        assert board.teams[0].score == 1

    def test_score_can_go_negative(self, board: Scoreboard):
        board.add_team("Owls")
        board.decrement(0)
        assert board.teams[0].score == -1

    def test_adjust_by_delta(self, board: Scoreboard):
        board.add_team("Owls")
        assert board.adjust(0, 5) == 5

    def test_delete_team(self, board: Scoreboard):
        board.add_team("Owls")
        board.add_team("Foxes")
        removed = board.delete_team(0)
        assert removed.name == "Owls"
        assert [t.name for t in board.teams] == ["Foxes"]

    @pytest.mark.parametrize("index", [-1, 1, 5])
    def test_bad_index_raises(self, board: Scoreboard, index: int):
        board.add_team("Owls")
        with pytest.raises(IndexError):
            board.increment(index)
        with pytest.raises(IndexError):
            board.delete_team(index)

    def test_teams_are_copies(self, board: Scoreboard):
        board.add_team("Owls")
        board.teams[0].score = 99
        assert board.teams[0].score == 0


# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------

class TestPersistence:
    def test_saved_under_fixed_key(self, board: Scoreboard, storage: Path):
        board.add_team("Owls")
        board.increment(0)
        data = json.loads(storage.read_text(encoding="utf-8"))
        assert data == {DEFAULT_STORAGE_KEY: [{"name": "Owls", "score": 1}]}

    def test_reloaded_at_startup(self, board: Scoreboard, storage: Path):
        board.add_team("Owls")
        board.add_team("Foxes")
        board.increment(1)
        again = Scoreboard(file_path=storage)
        assert again.teams == [Team("Owls", 0), Team("Foxes", 1)]

    def test_delete_persists(self, board: Scoreboard, storage: Path):
        board.add_team("Owls")
        board.delete_team(0)
        assert Scoreboard(file_path=storage).teams == []

    def test_other_keys_preserved(self, storage: Path):
        storage.write_text(json.dumps({"volume": 3}), encoding="utf-8")
        board = Scoreboard(file_path=storage)
        board.add_team("Owls")
        data = json.loads(storage.read_text(encoding="utf-8"))
        assert data["volume"] == 3
        assert data[DEFAULT_STORAGE_KEY] == [{"name": "Owls", "score": 0}]

    def test_custom_storage_key(self, storage: Path):
        board = Scoreboard(file_path=storage, storage_key="teams")
        board.add_team("Owls")
        assert "teams" in json.loads(storage.read_text(encoding="utf-8"))

    def test_corrupt_file_starts_empty(self, storage: Path, caplog: pytest.LogCaptureFixture):
        storage.write_text("{not json", encoding="utf-8")
        board = Scoreboard(file_path=storage)
        assert board.teams == []
        assert "Could not load teams" in caplog.text

    def test_non_object_file_starts_empty(self, storage: Path):
        storage.write_text("[1, 2]", encoding="utf-8")
        assert Scoreboard(file_path=storage).teams == []

    def test_malformed_entries_skipped(self, storage: Path):
        storage.write_text(
            json.dumps({DEFAULT_STORAGE_KEY: [{"name": "Owls", "score": "x"}, {"score": 4}, "junk", {"name": "Foxes", "score": 2}]}),
            encoding="utf-8",
        )
        assert Scoreboard(file_path=storage).teams == [Team("Owls", 0), Team("Foxes", 2)]

    def test_creates_parent_directory(self, tmp_path: Path):
        path = tmp_path / "nested" / "dir" / "storage.json"
        board = Scoreboard(file_path=path)
        board.add_team("Owls")
        assert path.exists()
