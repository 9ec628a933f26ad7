"""
Background Workers (Threading)
==============================
This module contains QThread subclasses for handling slow startup tasks.

Why is this file needed?
------------------------
1. Responsiveness: Reading a large word list on the main thread would freeze
   the window before the first frame is drawn.
2. Signals: The worker only READS the file. The resulting word set travels
   back to the main thread through a Qt Signal, and is installed into the
   WordDictionary there, so game state is never touched from two threads.

Classes:
    DictionaryLoader: Reads the newline-delimited word list.
"""
import logging
import os

from PySide6.QtCore import QThread, Signal

from rootwords.model.dictionary import read_word_list

logger = logging.getLogger(__name__)


class DictionaryLoader(QThread):
    # Signals to hand results back to the GUI thread
    words_loaded = Signal(object)  # tuple[str, ...] in file order
    error_occurred = Signal(str)

    def __init__(self, path: str | os.PathLike) -> None:
        super().__init__()
        self.path = path

    def run(self) -> None:
        try:
            logger.info(f"Reading word list in background thread: {self.path}")
            words = read_word_list(self.path)
            self.words_loaded.emit(words)
        except OSError as e:
            logger.error(f"Error in DictionaryLoader: {e}")
            self.error_occurred.emit(str(e))
