from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from eqpyramid.core.engine import GameEngine
from eqpyramid.core.scoreboard import Scoreboard
from eqpyramid.core.state import Outcome, Round, RoundState
from eqpyramid.ui.board_widgets import PyramidBoard
from eqpyramid.ui.colors import BoardColors
from eqpyramid.ui.formatting import (
    PLACEHOLDER,
    format_countdown,
    format_expression,
    format_result,
    format_used_formula,
    status_text,
)
from eqpyramid.ui.models import build_cell_states
from eqpyramid.ui.scoreboard_panel import ScoreboardPanel
from eqpyramid.ui.sound import OutcomeSounds

LOW_TIME_SECONDS = 10


class MainWindow(QMainWindow):
    """Shared display for one game: board, target, countdown, formula and scores.

    The window only forwards clicks to the engine and redraws from engine
    callbacks. An outcome stays on the formula display for a short moment
    while the engine has already emptied its selection.
    """

    def __init__(self, engine: GameEngine, scoreboard: Scoreboard, sounds: Optional[OutcomeSounds] = None) -> None:
        super().__init__()
        self._engine = engine
        self._scoreboard = scoreboard
        self._sounds = sounds
        self._feedback_selection: List[int] = []
        self._feedback_timer = QTimer(self)
        self._feedback_timer.setSingleShot(True)
        self._feedback_timer.timeout.connect(self._end_feedback)

        self._start_button: Optional[QPushButton] = None
        self._timer_label: Optional[QLabel] = None
        self._target_label: Optional[QLabel] = None
        self._formula_label: Optional[QLabel] = None
        self._status_label: Optional[QLabel] = None
        self._used_list: Optional[QListWidget] = None
        self._board: Optional[PyramidBoard] = None

        self.setWindowTitle("Equation Pyramid")
        self._build_ui()

        engine.on_round_started(self._on_round_started)
        engine.on_selection_changed(self._on_selection_changed)
        engine.on_tick(self._on_tick)
        engine.on_outcome(self._on_outcome)
        engine.on_round_ended(self._on_round_ended)

        self._render_timer(engine.time_remaining)
        QTimer.singleShot(0, self.showMaximized)

    def _build_ui(self) -> None:
        root = QWidget()
        root.setObjectName("root")
        root.setStyleSheet(
            f"""
            QWidget#root {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {BoardColors.BG_TOP}, stop:1 {BoardColors.BG_BOTTOM});
            }}
            QLabel {{ color: {BoardColors.TEXT_PRIMARY}; }}
            """
        )
        outer = QHBoxLayout(root)
        outer.setContentsMargins(24, 20, 24, 20)
        outer.setSpacing(20)

        game_column = QVBoxLayout()
        header = QHBoxLayout()
        self._start_button = QPushButton("Start")
        self._start_button.setMinimumHeight(44)
        self._start_button.setCursor(Qt.PointingHandCursor)
        self._start_button.clicked.connect(lambda: self._engine.start_round())
        header.addWidget(self._start_button)
        header.addStretch(1)
        self._timer_label = QLabel()
        self._timer_label.setStyleSheet(f"color: {BoardColors.TIMER}; font-size: 40px; font-weight: 800;")
        header.addWidget(self._timer_label)
        game_column.addLayout(header)

        self._board = PyramidBoard(self._engine.select_cell, cell_count=self._engine.settings.cell_count)
        game_column.addWidget(self._board, 1)

        target_row = QHBoxLayout()
        target_row.addStretch(1)
        target_caption = QLabel("Target")
        target_caption.setStyleSheet(f"color: {BoardColors.TEXT_MUTED}; font-size: 20px;")
        target_row.addWidget(target_caption)
        self._target_label = QLabel("?")
        self._target_label.setStyleSheet(f"color: {BoardColors.TARGET}; font-size: 56px; font-weight: 900;")
        target_row.addWidget(self._target_label)
        target_row.addStretch(1)
        game_column.addLayout(target_row)

        formula_row = QHBoxLayout()
        self._formula_label = QLabel(PLACEHOLDER)
        self._formula_label.setAlignment(Qt.AlignCenter)
        self._formula_label.setStyleSheet("font-size: 28px;")
        formula_row.addWidget(self._formula_label, 1)
        self._status_label = QLabel()
        self._status_label.setStyleSheet("font-size: 24px; font-weight: 700;")
        formula_row.addWidget(self._status_label)
        clear_button = QPushButton("Clear")
        clear_button.clicked.connect(self._clear_selection)
        formula_row.addWidget(clear_button)
        game_column.addLayout(formula_row)

        outer.addLayout(game_column, 3)

        side_column = QVBoxLayout()
        used_title = QLabel("Used formulas")
        used_title.setStyleSheet("font-size: 18px; font-weight: 700;")
        side_column.addWidget(used_title)
        self._used_list = QListWidget()
        self._used_list.setStyleSheet(
            f"background: {BoardColors.PANEL_BG}; color: {BoardColors.TEXT_PRIMARY}; font-size: 16px;"
        )
        side_column.addWidget(self._used_list, 1)
        side_column.addWidget(ScoreboardPanel(self._scoreboard), 1)
        outer.addLayout(side_column, 1)

        self.setCentralWidget(root)

        self.start_shortcut = QShortcut(QKeySequence(Qt.Key_F5), self)
        self.start_shortcut.activated.connect(lambda: self._engine.start_round())
        self.clear_shortcut = QShortcut(QKeySequence(Qt.Key_Escape), self)
        self.clear_shortcut.activated.connect(self._clear_selection)

    # -- engine callbacks --------------------------------------------------

    def _on_round_started(self, current: Round) -> None:
        self._feedback_timer.stop()
        self._feedback_selection = []
        self._used_list.clear()
        self._target_label.setText(str(current.target))
        self._render_timer(current.time_remaining)
        self._render_board(current.selection)
        self._render_formula(current.selection)
        self._start_button.setText("In progress…")
        self._start_button.setEnabled(False)

    def _on_selection_changed(self, selection: List[int]) -> None:
        if not selection and self._feedback_timer.isActive():
            return
        if selection:
            self._feedback_timer.stop()
            self._feedback_selection = []
        self._render_board(selection)
        self._render_formula(selection)

    def _on_tick(self, remaining: int) -> None:
        self._render_timer(remaining)

    def _on_outcome(self, outcome: Outcome) -> None:
        cells = self._engine.cells
        color = BoardColors.CORRECT if outcome.is_correct else BoardColors.INCORRECT
        expression = format_expression(cells, outcome.combination)
        if outcome.result is not None:
            expression = f"{expression} = {format_result(outcome.result)}"
        self._formula_label.setText(expression)
        self._status_label.setText(status_text(outcome.status))
        self._status_label.setStyleSheet(f"color: {color}; font-size: 24px; font-weight: 700;")

        if outcome.is_correct:
            entry = self._engine.round.used_formulas[-1]
            self._used_list.addItem(format_used_formula(cells, entry))
        if self._sounds is not None:
            self._sounds.play(outcome.is_correct)

        self._feedback_selection = list(outcome.combination)
        self._feedback_timer.start(self._engine.settings.feedback_ms)

    def _on_round_ended(self, current: Round) -> None:
        self._render_timer(current.time_remaining)
        self._start_button.setText("Next round")
        self._start_button.setEnabled(True)

    # -- rendering ---------------------------------------------------------

    def _clear_selection(self) -> None:
        self._feedback_timer.stop()
        self._feedback_selection = []
        self._engine.clear_selection()
        self._render_board([])
        self._render_formula([])

    def _end_feedback(self) -> None:
        self._feedback_selection = []
        selection = self._engine.selection
        self._render_board(selection)
        self._render_formula(selection)

    def _render_board(self, selection: List[int]) -> None:
        shown = self._feedback_selection or selection
        self._board.set_states(build_cell_states(self._engine.cells, shown))

    def _render_formula(self, selection: List[int]) -> None:
        self._status_label.setText("")
        if not selection:
            self._formula_label.setText(PLACEHOLDER)
            return
        self._formula_label.setText(format_expression(self._engine.cells, selection))

    def _render_timer(self, remaining: int) -> None:
        low = self._engine.state is RoundState.ACTIVE and remaining <= LOW_TIME_SECONDS
        color = BoardColors.TIMER_LOW if low else BoardColors.TIMER
        self._timer_label.setStyleSheet(f"color: {color}; font-size: 40px; font-weight: 800;")
        self._timer_label.setText(format_countdown(remaining))

    def closeEvent(self, event) -> None:
        self._engine.end_round()
        super().closeEvent(event)
