from ..presenter import BoardView, GamePresenter, glyph_for
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot


class MaruBatsuWindow(QMainWindow, BoardView):
    """
    main window: board + status line, drives a GamePresenter
    """
    def __init__(self):
        """
        build widgets, then start the first game
        """
        super().__init__()
        self.board_widget = BoardWidget(parent=self)
        self._setup_ui()
        self.presenter = GamePresenter(self)

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Maru-Batsu")
        self.setStyleSheet("QMainWindow { background-color: #222; }")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        # status line under the board
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.main_layout.addWidget(self.message_label)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        self.new_game_action = QAction("New Game", self)
        self.new_game_action.triggered.connect(self._on_new_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(self.new_game_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    # --- BoardView ---

    def render_cell(self, row, column, mark):
        self.board_widget.set_glyph(row, column, glyph_for(mark))

    def show_message(self, text):
        self.message_label.setText(text)

    def clear(self):
        self.board_widget.clear()

    # --- slots ---

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        # rejected taps are simply ignored
        self.presenter.on_cell_tapped(r, c)

    @Slot()
    def _on_new_game(self):
        self.presenter.new_game()
