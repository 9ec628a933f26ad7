"""
Main Application Window
=======================
The primary GUI container: letters input on top, the letter ring on the left,
the derivation tree on the right, score and notifications below.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the game.
2. Routing: It connects global actions (New game, Word Finder) and the store
   signals to the widgets that display them.
"""
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QSplitter, QLineEdit, QPushButton, QLabel
)

from rootwords.app.application import VISIBLE_APP_NAME
from rootwords.app.state import Store
from rootwords.app.ui.ring_widget import RingWidget
from rootwords.app.ui.tree_view import TreeView
from rootwords.app.ui.word_finder import WordFinderDialog

MESSAGE_TIMEOUT_MS = 3000


class MainWindow(QMainWindow):
    def __init__(self, store: Store) -> None:
        super().__init__()
        self.store = store
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1100, 650)

        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)

        # --- 1. LETTERS INPUT ---
        top = QHBoxLayout()
        top.addWidget(QLabel("Letters:"))
        self.letters_edit = QLineEdit(",".join(store.ring.letters))
        self.letters_edit.setPlaceholderText("e.g. S,T,A,R,L,I,N,G")
        self.letters_edit.returnPressed.connect(self.on_letters_applied)
        top.addWidget(self.letters_edit, 1)
        self.btn_apply = QPushButton("Apply")
        self.btn_apply.clicked.connect(self.on_letters_applied)
        top.addWidget(self.btn_apply)
        main_layout.addLayout(top)

        # --- 2. SPLITTER (RING | TREE) ---
        splitter = QSplitter(Qt.Orientation.Horizontal)
        main_layout.addWidget(splitter, 1)

        left = QWidget()
        left_layout = QVBoxLayout(left)
        self.lbl_word = QLabel("")
        self.lbl_word.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_word.setStyleSheet("font-size: 22px; font-weight: bold;")
        left_layout.addWidget(self.lbl_word)

        self.ring_widget = RingWidget(store)
        left_layout.addWidget(self.ring_widget, 1)

        self.btn_enter = QPushButton("Enter")
        self.btn_enter.setMinimumHeight(36)
        self.btn_enter.clicked.connect(store.activate_commit)
        left_layout.addWidget(self.btn_enter)
        splitter.addWidget(left)

        self.tree_view = TreeView(store)
        splitter.addWidget(self.tree_view)
        splitter.setSizes([380, 720])

        # --- 3. SCORE ---
        self.lbl_score = QLabel()
        self.lbl_score.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.lbl_score.setStyleSheet("font-size: 16px;")
        main_layout.addWidget(self.lbl_score)
        self._set_score(store.score)

        self.statusBar().showMessage("Loading dictionary...")

        # --- SIGNAL CONNECTIONS ---
        self.ring_widget.word_changed.connect(self.lbl_word.setText)
        store.score_changed.connect(self._set_score)
        store.word_accepted.connect(lambda word: self.statusBar().showMessage(f"Added '{word}'.", MESSAGE_TIMEOUT_MS))
        store.word_rejected.connect(lambda msg: self.statusBar().showMessage(msg, MESSAGE_TIMEOUT_MS))
        store.dictionary_ready.connect(
            lambda n: self.statusBar().showMessage(f"Dictionary ready ({n} words).", MESSAGE_TIMEOUT_MS)
        )
        store.dictionary_failed.connect(lambda msg: self.statusBar().showMessage(f"Dictionary failed to load: {msg}"))
        store.letters_rejected.connect(lambda msg: self.statusBar().showMessage(msg, MESSAGE_TIMEOUT_MS))
        store.session_reset.connect(self._on_session_reset)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

    def _create_actions(self) -> None:
        self.act_new = QAction("New Game", self)
        self.act_new.setShortcut("Ctrl+N")
        self.act_new.triggered.connect(self.store.new_game)

        self.act_finder = QAction("Word Finder...", self)
        self.act_finder.setShortcut("Ctrl+F")
        self.act_finder.triggered.connect(self.on_word_finder)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        game_menu = self.menuBar().addMenu("&Game")
        game_menu.addAction(self.act_new)
        game_menu.addAction(self.act_finder)
        game_menu.addSeparator()
        game_menu.addAction(self.act_exit)

    # --- SLOTS ---

    def _set_score(self, score: int) -> None:
        self.lbl_score.setText(f"Score: {score}")

    def _on_session_reset(self, root_word: str) -> None:
        self.lbl_word.setText("")
        self.letters_edit.setText(",".join(self.store.ring.letters))

    def on_letters_applied(self) -> None:
        self.store.reconfigure(self.letters_edit.text())

    def on_word_finder(self) -> None:
        dialog = WordFinderDialog(self.store.dictionary, self.store.ring.word, self)
        dialog.exec()
