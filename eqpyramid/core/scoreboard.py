from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "equationPyramidTeams"


@dataclass
class Team:
    name: str
    score: int = 0


def default_storage_path() -> Path:
    home = os.environ.get("EQPYRAMID_HOME")
    base = Path(home) if home else Path.home() / ".eqpyramid"
    return base / "storage.json"


class Scoreboard:
    """Manually kept team scores. Persists to disk across app restarts.

    The storage file is a JSON object; the team list lives under a single
    fixed key so other values can share the file.
    """

    def __init__(self, file_path: Optional[Path] = None, storage_key: str = DEFAULT_STORAGE_KEY) -> None:
        self._file_path = Path(file_path) if file_path is not None else default_storage_path()
        self._storage_key = storage_key
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._teams = self._load()

    @property
    def teams(self) -> List[Team]:
        """Copies of the current teams, in insertion order."""
        return [Team(t.name, t.score) for t in self._teams]

    def __len__(self) -> int:
        return len(self._teams)

    def add_team(self, name: str) -> Optional[Team]:
        """Add a team with score 0. Blank names are ignored."""
        name = (name or "").strip()
        if not name:
            return None
        team = Team(name=name)
        self._teams.append(team)
        self._save()
        return Team(team.name, team.score)

    def delete_team(self, index: int) -> Team:
        removed = self._teams.pop(self._check_index(index))
        self._save()
        return removed

    def adjust(self, index: int, delta: int) -> int:
        team = self._teams[self._check_index(index)]
        team.score += delta
        self._save()
        return team.score

    def increment(self, index: int) -> int:
        return self.adjust(index, 1)

    def decrement(self, index: int) -> int:
        return self.adjust(index, -1)

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self._teams):
            raise IndexError(f"no team at position {index}")
        return index

    def _load(self) -> List[Team]:
        if not self._file_path.exists():
            return []
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load teams from %s: %s", self._file_path, e)
            return []
        if not isinstance(payload, dict):
            logger.warning("Ignoring malformed storage file %s", self._file_path)
            return []

        teams: List[Team] = []
        for entry in payload.get(self._storage_key) or []:
            if not isinstance(entry, dict) or not str(entry.get("name", "")).strip():
                continue
            try:
                score = int(entry.get("score", 0))
            except (TypeError, ValueError):
                score = 0
            teams.append(Team(name=str(entry["name"]).strip(), score=score))
        return teams

    def _save(self) -> None:
        payload = {}
        if self._file_path.exists():
            try:
                existing = json.loads(self._file_path.read_text(encoding="utf-8"))
                if isinstance(existing, dict):
                    payload = existing
            except (json.JSONDecodeError, OSError):
                payload = {}
        payload[self._storage_key] = [asdict(t) for t in self._teams]
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save teams to %s: %s", self._file_path, e)
