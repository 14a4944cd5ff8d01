"""Collapsible team scoreboard panel."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from eqpyramid.core.scoreboard import Scoreboard
from eqpyramid.ui.colors import BoardColors


def _small_button(text: str) -> QPushButton:
    btn = QPushButton(text)
    btn.setFixedSize(32, 32)
    btn.setCursor(Qt.PointingHandCursor)
    return btn


class ScoreboardPanel(QFrame):
    """Team list with add, delete and +1 / -1 controls. Scores are kept by hand."""

    def __init__(self, scoreboard: Scoreboard, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._scoreboard = scoreboard
        self.setObjectName("scoreboardPanel")
        self.setStyleSheet(
            f"""
            QFrame#scoreboardPanel {{
                background: {BoardColors.PANEL_BG};
                border-radius: 14px;
            }}
            QLabel {{ color: {BoardColors.TEXT_PRIMARY}; }}
            """
        )

        layout = QVBoxLayout(self)
        layout.setContentsMargins(14, 12, 14, 12)
        layout.setSpacing(8)

        header = QHBoxLayout()
        title = QLabel("Scoreboard")
        title.setStyleSheet("font-size: 18px; font-weight: 700;")
        header.addWidget(title)
        header.addStretch(1)
        self._toggle_button = QPushButton("Hide")
        self._toggle_button.clicked.connect(self._toggle)
        header.addWidget(self._toggle_button)
        layout.addLayout(header)

        self._body = QWidget()
        body_layout = QVBoxLayout(self._body)
        body_layout.setContentsMargins(0, 0, 0, 0)

        add_row = QHBoxLayout()
        self._name_input = QLineEdit()
        self._name_input.setPlaceholderText("Team name")
        self._name_input.returnPressed.connect(self._add_team)
        add_row.addWidget(self._name_input, 1)
        add_button = QPushButton("Add")
        add_button.clicked.connect(self._add_team)
        add_row.addWidget(add_button)
        body_layout.addLayout(add_row)

        self._team_list = QVBoxLayout()
        self._team_list.setSpacing(4)
        body_layout.addLayout(self._team_list)
        body_layout.addStretch(1)
        layout.addWidget(self._body, 1)

        self.refresh()

    def _toggle(self) -> None:
        visible = not self._body.isVisible()
        self._body.setVisible(visible)
        self._toggle_button.setText("Hide" if visible else "Show")

    def _add_team(self) -> None:
        if self._scoreboard.add_team(self._name_input.text()) is not None:
            self._name_input.clear()
            self.refresh()

    def _delete_team(self, index: int) -> None:
        name = self._scoreboard.teams[index].name
        answer = QMessageBox.question(self, "Delete team", f"Delete team “{name}”?")
        if answer == QMessageBox.StandardButton.Yes:
            self._scoreboard.delete_team(index)
            self.refresh()

    def _adjust(self, index: int, delta: int) -> None:
        self._scoreboard.adjust(index, delta)
        self.refresh()

    def refresh(self) -> None:
        """Rebuild the team rows from the scoreboard."""
        while self._team_list.count():
            item = self._team_list.takeAt(0)
            w = item.widget()
            if w is not None:
                w.setParent(None)
                w.deleteLater()

        for index, team in enumerate(self._scoreboard.teams):
            row = QWidget()
            row_layout = QHBoxLayout(row)
            row_layout.setContentsMargins(0, 0, 0, 0)
            name = QLabel(team.name)
            name.setTextFormat(Qt.PlainText)
            score = QLabel(str(team.score))
            score.setStyleSheet(f"color: {BoardColors.TARGET}; font-size: 18px; font-weight: 700;")
            row_layout.addWidget(name, 1)
            row_layout.addWidget(score)

            plus = _small_button("+")
            plus.clicked.connect(lambda _=False, i=index: self._adjust(i, 1))
            minus = _small_button("-")
            minus.clicked.connect(lambda _=False, i=index: self._adjust(i, -1))
            delete = _small_button("✕")
            delete.clicked.connect(lambda _=False, i=index: self._delete_team(i))
            for btn in (plus, minus, delete):
                row_layout.addWidget(btn)
            self._team_list.addWidget(row)
