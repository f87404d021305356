import logging

from ..board import Coordinate
from ..config import DRAW_MESSAGE, OCCUPIED_MESSAGE, WIN_MESSAGE
from ..game_logic import GameSession, Outcome
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QMessageBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, session=None):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.session = session or GameSession()
        self.board_widget = BoardWidget(self.session, parent=self)
        # show the end-of-game box; tests turn it off
        self.show_alerts = True

        self._setup_ui()
        self._show_turn()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QMenuBar { background-color: #333; color: #eee; }
            QMenuBar::item:selected { background-color: #555; }
            QMenu { background-color: #333; color: #eee; border: 1px solid #555; }
            QMenu::item:selected { background-color: #555; }
            QPushButton { background-color: #444; color: #eee; border: 1px solid #555;
                          padding: 8px 15px; border-radius: 5px; }
            QPushButton:hover { background-color: #555; }
            QLabel { color: #eee; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + reset
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + reset button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.reset_button = QPushButton("Reset Game")
        self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label)
        hl.addStretch(1)
        hl.addWidget(self.reset_button)

    def _update_message(self, text, is_error=False, is_success=False):
        # set message text + style
        style = "color: #eee;"
        if is_error:     style = "color: #ff8a8a; font-weight: bold;"
        elif is_success: style = "color: lime; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _show_turn(self):
        p = self.session.current_player
        self._update_message(f"{p.name} ({p.symbol})'s turn")

    def _alert(self, title, text):
        if self.show_alerts:
            QMessageBox.information(self, title, text)

    @Slot(int, int)
    def _on_cell_clicked(self, column, row):
        res = self.session.play(Coordinate(column, row))
        if res.outcome is Outcome.INVALID:
            self._update_message(OCCUPIED_MESSAGE, is_error=True)
            return

        # the session has already cleared the board if the game ended
        self.board_widget.update()
        if res.outcome is Outcome.WIN:
            text = f"{WIN_MESSAGE}\n{res.player.name} ({res.player.symbol}) wins!"
            self._update_message(f"{res.player.name} wins! new game started.", is_success=True)
            self._alert("Game Over", text)
        elif res.outcome is Outcome.DRAW:
            self._update_message(f"{DRAW_MESSAGE} new game started.", is_success=True)
            self._alert("Game Over", DRAW_MESSAGE)
        else:
            self._show_turn()

    @Slot()
    def reset_game(self):
        # back to an empty board, player 1 first
        logger.info("new game requested")
        self.session.reset()
        self.board_widget.update()
        self._show_turn()
