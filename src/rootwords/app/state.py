from __future__ import annotations

import logging
import os
from typing import Optional, TYPE_CHECKING

from PySide6.QtCore import QObject, Signal, Slot

from rootwords import config
from rootwords.controller.session import AttachPolicy, AvailabilityPolicy, SelectionController
from rootwords.controller.workers import DictionaryLoader
from rootwords.model.dictionary import WordDictionary
from rootwords.model.geometry import Point

if TYPE_CHECKING:
    from rootwords.model.errors import WordRejected
    from rootwords.model.gesture import GestureState
    from rootwords.model.layout import Layout
    from rootwords.model.ring import LetterRing
    from rootwords.model.tree import DerivationTree, NodeId, TreeNode

logger = logging.getLogger(__name__)


class Store(QObject):
    """Central state store: wraps the SelectionController and re-emits its events as Qt signals."""
    tree_changed = Signal(object)
    score_changed = Signal(int)
    selection_changed = Signal(object)
    availability_changed = Signal()
    word_accepted = Signal(str)
    word_rejected = Signal(str)
    session_reset = Signal(str)
    dictionary_ready = Signal(int)
    dictionary_failed = Signal(str)
    letters_rejected = Signal(str)

    def __init__(
        self,
        dictionary: Optional[WordDictionary] = None,
        letters: str = config.DEFAULT_LETTERS,
        attach_policy: AttachPolicy = AttachPolicy.BRANCH,
        availability_policy: AvailabilityPolicy = AvailabilityPolicy.MARK_CHILD_SLOTS_USED,
    ) -> None:
        super().__init__()
        self.dictionary = dictionary if dictionary is not None else WordDictionary()
        self._loader: Optional[DictionaryLoader] = None

        self.controller = SelectionController(
            self.dictionary,
            letters,
            attach_policy=attach_policy,
            availability_policy=availability_policy,
        )
        self.controller.add_commit_listener(self._on_committed)
        self.controller.add_reject_listener(self._on_rejected)
        self.controller.add_reset_listener(self._on_reset)
        self.controller.add_gesture_listener(self._on_gesture_changed)
        self.controller.add_availability_listener(self.availability_changed.emit)

    # ---- read access for views ----

    @property
    def ring(self) -> LetterRing:
        return self.controller.ring

    @property
    def tree(self) -> DerivationTree:
        return self.controller.tree

    @property
    def layout(self) -> Layout:
        return self.controller.layout

    @property
    def score(self) -> int:
        return self.controller.score

    @property
    def current_node_id(self) -> NodeId:
        return self.controller.current_node_id

    @property
    def gesture_word(self) -> str:
        return self.controller.gesture.word

    def gesture_path(self) -> list[Point]:
        return self.controller.gesture.path_points()

    # ---- input ----

    def pointer_down(self, x: float, y: float) -> None:
        self.controller.pointer_down(Point(x, y))

    def pointer_move(self, x: float, y: float) -> None:
        self.controller.pointer_move(Point(x, y))

    def pointer_up(self, x: float, y: float) -> None:
        self.controller.pointer_up(Point(x, y))

    @Slot()
    def activate_commit(self) -> None:
        self.controller.activate_commit()

    def select_node(self, node_id: NodeId) -> None:
        self.controller.select_node(node_id)
        self.tree_changed.emit(self.layout)

    def reconfigure(self, letters: str) -> None:
        try:
            self.controller.reconfigure(letters)
        except ValueError as e:
            logger.warning(f"Letters '{letters}' rejected: {e}")
            self.letters_rejected.emit(str(e))

    @Slot()
    def new_game(self) -> None:
        self.controller.reset()

    # ---- dictionary ----

    def load_dictionary(self, path: str | os.PathLike = config.DEFAULT_DICTIONARY_PATH) -> None:
        """Read the word list in a background thread; commits fail closed until it is ready."""
        if self.dictionary.loaded or self._loader is not None:
            return
        self._loader = DictionaryLoader(path)
        self._loader.words_loaded.connect(self.install_words)
        self._loader.error_occurred.connect(self._on_dictionary_error)
        self._loader.start()

    @Slot(object)
    def install_words(self, words) -> None:
        self.dictionary.install(words)
        self.dictionary_ready.emit(len(self.dictionary))

    @Slot(str)
    def _on_dictionary_error(self, message: str) -> None:
        logger.error(f"Dictionary could not be loaded: {message}")
        self.dictionary_failed.emit(message)

    # ---- controller callbacks ----

    def _on_committed(self, node: TreeNode) -> None:
        self.word_accepted.emit(node.word)
        self.tree_changed.emit(self.layout)
        self.score_changed.emit(self.score)

    def _on_rejected(self, error: WordRejected) -> None:
        self.word_rejected.emit(str(error))

    def _on_reset(self) -> None:
        self.session_reset.emit(self.ring.word)
        self.tree_changed.emit(self.layout)
        self.score_changed.emit(self.score)
        self.selection_changed.emit(self.controller.gesture.state)

    def _on_gesture_changed(self, state: GestureState) -> None:
        self.selection_changed.emit(state)
