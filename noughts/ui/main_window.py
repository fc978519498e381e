import logging
from functools import partial

from ..game_logic import Mode, Status
from ..ui.board_widget import BoardWidget
from .. import config

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QMessageBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, QTimer, Slot

log = logging.getLogger(__name__)

MODE_LABELS = {
    Mode.HUMAN_VS_OPPONENT: "Playing vs Computer",
    Mode.HUMAN_VS_HUMAN: "Playing vs Human",
}


class TicTacToeWindow(QMainWindow):
    """
    main window: board, status line, mode + reset buttons, result popup
    all game decisions live in the controller, this only renders and forwards
    """
    def __init__(self, controller, popup_delay_ms=config.RESULT_POPUP_DELAY_MS):
        super().__init__()
        self.controller = controller
        self.popup_delay_ms = popup_delay_ms
        self.result_popup = None
        self.board_widget = BoardWidget(controller, parent=self)

        self._setup_ui()
        controller.state_changed.connect(self._refresh)
        controller.outcome_changed.connect(self._on_outcome_changed)
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic Tac Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QPushButton { padding: 6px 14px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_top_controls()        # status + mode toggle
        self.main_layout.addWidget(self.controls_top_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self.controller.submit_move)
        self.reset_button = QPushButton("Reset Game")
        self.reset_button.clicked.connect(self.controller.reset)
        self.main_layout.addWidget(self.reset_button, alignment=Qt.AlignCenter)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.controller.reset)
        mode_action = QAction("Toggle Opponent", self)
        mode_action.triggered.connect(self.controller.toggle_mode)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (new_action, mode_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_top_controls(self):
        # status label above, mode button below
        self.controls_top_widget = QWidget()
        vl = QVBoxLayout(self.controls_top_widget)
        self.controls_top_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(14); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.mode_button = QPushButton("")
        self.mode_button.clicked.connect(self.controller.toggle_mode)
        hl = QHBoxLayout()
        hl.addStretch(1); hl.addWidget(self.mode_button); hl.addStretch(1)
        vl.addWidget(self.message_label)
        vl.addLayout(hl)

    @Slot()
    def _refresh(self):
        # status text + style from controller state
        c = self.controller
        style = "color: #eee;"
        if c.status is Status.WON:    style = "color: lime; font-weight: bold;"
        elif c.status is Status.DRAW: style = "color: #ffd27f; font-weight: bold;"
        elif c.opponent_pending:      style = "color: #aaa; font-style: italic;"
        else:                         style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(c.status_text())
        self.mode_button.setText(MODE_LABELS[c.mode])
        self.board_widget.update()

    @Slot(object)
    def _on_outcome_changed(self, outcome):
        status, _winner = outcome
        if status is Status.IN_PROGRESS:
            self._close_popup()
            return
        # tagged with the generation so a reset before it fires cancels it
        QTimer.singleShot(
            self.popup_delay_ms,
            partial(self._show_result_popup, self.controller.generation)
        )

    def _show_result_popup(self, generation):
        c = self.controller
        if generation != c.generation or not c.game_over:
            return
        if c.status is Status.WON:
            title = f"Player {c.winner.value} Wins!"
        else:
            title = "It's a Draw!"
        log.debug("showing result popup: %s", title)
        self._close_popup()
        self.result_popup = QMessageBox(self)
        self.result_popup.setWindowTitle("Game Over")
        self.result_popup.setText(title)
        self.result_popup.setInformativeText("Close to play again")
        self.result_popup.finished.connect(self._on_popup_finished)
        self.result_popup.open()

    @Slot(int)
    def _on_popup_finished(self, _result):
        # dismissing the popup starts the next game
        popup, self.result_popup = self.result_popup, None
        if popup is not None:
            popup.deleteLater()
        if self.controller.game_over:
            self.controller.reset()

    def _close_popup(self):
        popup, self.result_popup = self.result_popup, None
        if popup is not None:
            popup.finished.disconnect(self._on_popup_finished)
            popup.close()
            popup.deleteLater()
