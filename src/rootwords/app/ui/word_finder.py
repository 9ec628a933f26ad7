"""Dialog listing every dictionary word spelled with the given letters."""
from __future__ import annotations

from PySide6.QtCore import QRegularExpression
from PySide6.QtGui import QRegularExpressionValidator
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLineEdit, QPushButton, QListWidget, QLabel, QDialogButtonBox,
    QSpinBox
)

from rootwords import config
from rootwords.model.dictionary import WordDictionary


class WordFinderDialog(QDialog):
    def __init__(self, dictionary: WordDictionary, letters: str = "", parent=None) -> None:
        super().__init__(parent)
        self.dictionary = dictionary
        self.setWindowTitle("Word Finder")
        self.resize(320, 420)

        layout = QVBoxLayout(self)

        row = QHBoxLayout()
        self.letters_edit = QLineEdit(letters.lower())
        # Only allow letters
        self.letters_edit.setValidator(QRegularExpressionValidator(QRegularExpression("[A-Za-z]*"), self))
        self.letters_edit.returnPressed.connect(self.on_find_clicked)
        row.addWidget(self.letters_edit, 1)

        self.min_length_spin = QSpinBox()
        self.min_length_spin.setRange(1, 20)
        self.min_length_spin.setValue(config.SUBSET_MIN_WORD_LENGTH)
        self.min_length_spin.setPrefix("min ")
        row.addWidget(self.min_length_spin)

        self.btn_find = QPushButton("Find")
        self.btn_find.clicked.connect(self.on_find_clicked)
        row.addWidget(self.btn_find)
        layout.addLayout(row)

        self.results = QListWidget()
        layout.addWidget(self.results, 1)

        self.lbl_status = QLabel("")
        layout.addWidget(self.lbl_status)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Close)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def on_find_clicked(self) -> None:
        self.results.clear()
        letters = self.letters_edit.text().strip()
        if not letters:
            self.lbl_status.setText("Enter some letters.")
            return
        if not self.dictionary.loaded:
            self.lbl_status.setText("Dictionary is still loading.")
            return

        words = self.dictionary.find_subset_words(letters, self.min_length_spin.value())
        if words:
            self.results.addItems(words)
            self.lbl_status.setText(f"{len(words)} words found.")
        else:
            self.lbl_status.setText("No words found.")
