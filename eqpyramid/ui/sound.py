"""Correct / incorrect feedback sounds."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from PySide6.QtCore import QObject, QUrl
from PySide6.QtMultimedia import QSoundEffect

logger = logging.getLogger(__name__)

SOUND_FILES = {"correct": "correct.wav", "incorrect": "incorrect.wav"}


class OutcomeSounds(QObject):
    """Plays one short effect per outcome. Missing files are skipped."""

    def __init__(self, sounds_dir: Optional[Path] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        base = sounds_dir or Path(__file__).resolve().parent.parent / "assets" / "sounds"
        self._effects: Dict[str, QSoundEffect] = {}
        for kind, filename in SOUND_FILES.items():
            path = base / filename
            if not path.exists():
                logger.warning("Sound file not found: %s", path)
                continue
            effect = QSoundEffect(self)
            effect.setSource(QUrl.fromLocalFile(str(path)))
            self._effects[kind] = effect

    def play(self, correct: bool) -> None:
        effect = self._effects.get("correct" if correct else "incorrect")
        if effect is None:
            return
        effect.stop()
        effect.play()
