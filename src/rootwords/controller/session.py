"""
Selection Controller
====================
Orchestrates one game session.

Why is this file needed?
------------------------
It is the only place that mutates the game state. On every committed gesture
it validates the word, rejects duplicates, grows the derivation tree, then
recomputes layout and score and decides which ring letters the next gesture
may use.

    IDLE -> GESTURING -> (REJECTED | COMMITTED) -> IDLE

Views never touch the model directly; they call the pointer methods here and
subscribe to the listener hooks.
"""
from __future__ import annotations

import logging
from enum import Enum, StrEnum, auto
from typing import Callable, Optional, Sequence, Union

from rootwords import config
from rootwords.model.dictionary import WordDictionary
from rootwords.model.errors import DictionaryUnavailable, DuplicateWord, InvalidWord, WordRejected
from rootwords.model.gesture import GestureSelector, GestureState, WordCommitted
from rootwords.model.geometry import Point
from rootwords.model.layout import Layout, compute_layout
from rootwords.model.ring import LetterRing, LetterSlot, normalize_letters, parse_letters
from rootwords.model.scoring import compute_score
from rootwords.model.tree import DerivationTree, NodeId, NodeRef, TreeNode

logger = logging.getLogger(__name__)


class SessionPhase(Enum):
    IDLE = auto()
    GESTURING = auto()
    REJECTED = auto()
    COMMITTED = auto()


class AttachPolicy(StrEnum):
    """Where new words are attached."""
    BRANCH = "branch"  # under the node the player selected last
    CHAIN = "chain"  # always under the most recently added word


class AvailabilityPolicy(StrEnum):
    """Which ring letters stay selectable after a node is selected."""
    MARK_CHILD_SLOTS_USED = "mark-child-slots-used"
    NODE_SLOTS_ONLY = "node-slots-only"


class SelectionController:
    def __init__(
        self,
        dictionary: WordDictionary,
        letters: Union[str, Sequence[str]] = config.DEFAULT_LETTERS,
        attach_policy: AttachPolicy = AttachPolicy.BRANCH,
        availability_policy: AvailabilityPolicy = AvailabilityPolicy.MARK_CHILD_SLOTS_USED,
    ) -> None:
        self.dictionary = dictionary
        self.attach_policy = attach_policy
        self.availability_policy = availability_policy

        self.phase = SessionPhase.IDLE
        self.used_words: set[str] = set()
        self.layout: Layout = {}
        self.score: int = 0
        self._last_commit_result: Optional[TreeNode] = None

        self._commit_listeners: list[Callable[[TreeNode], None]] = []
        self._reject_listeners: list[Callable[[WordRejected], None]] = []
        self._reset_listeners: list[Callable[[], None]] = []
        self._gesture_listeners: list[Callable[[GestureState], None]] = []
        self._availability_listeners: list[Callable[[], None]] = []

        self.reconfigure(letters)

    # ------------------------------------------------------------------
    # Listener hooks
    # ------------------------------------------------------------------

    def add_commit_listener(self, listener: Callable[[TreeNode], None]) -> None:
        self._commit_listeners.append(listener)

    def add_reject_listener(self, listener: Callable[[WordRejected], None]) -> None:
        self._reject_listeners.append(listener)

    def add_reset_listener(self, listener: Callable[[], None]) -> None:
        self._reset_listeners.append(listener)

    def add_gesture_listener(self, listener: Callable[[GestureState], None]) -> None:
        self._gesture_listeners.append(listener)

    def add_availability_listener(self, listener: Callable[[], None]) -> None:
        self._availability_listeners.append(listener)

    def _on_gesture_changed(self, state: GestureState) -> None:
        for listener in self._gesture_listeners:
            listener(state)

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------

    def reconfigure(self, letters: Union[str, Sequence[str]]) -> None:
        """
        Start over with a new root letter set. Discards tree and used words.

        Raises:
            ValueError: If `letters` holds no letters. The running session is kept.
        """
        letters = parse_letters(letters) if isinstance(letters, str) else normalize_letters(letters)
        if not letters:
            raise ValueError("At least one root letter is required.")

        self.ring = LetterRing(letters)
        self.gesture = GestureSelector(self.ring)
        self.gesture.add_commit_listener(self.handle_commit)
        self.gesture.add_change_listener(self._on_gesture_changed)

        self.tree = DerivationTree()
        root = self.tree.create_root(self.ring.slots)
        self.used_words.clear()
        self.current_node_id: NodeId = root.id
        self.last_inserted_id: NodeId = root.id
        self.phase = SessionPhase.IDLE

        self.recompute()
        self._update_availability()
        logger.info(f"Session reset with root letters '{root.word}'.")

        for listener in self._reset_listeners:
            listener()

    def reset(self) -> None:
        """New game with the same letters."""
        self.reconfigure(self.ring.letters)

    @property
    def current_node(self) -> TreeNode:
        return self.tree.node(self.current_node_id)

    def recompute(self) -> None:
        self.layout = compute_layout(self.tree)
        self.score = compute_score(self.tree)

    # ------------------------------------------------------------------
    # Pointer input
    # ------------------------------------------------------------------

    def pointer_down(self, point: Point) -> None:
        self.phase = SessionPhase.GESTURING
        self.gesture.start(point)

    def pointer_move(self, point: Point) -> None:
        if self.gesture.active:
            self.phase = SessionPhase.GESTURING
        self.gesture.move(point)

    def pointer_up(self, point: Optional[Point] = None) -> None:
        self.gesture.end(point)
        self.phase = SessionPhase.IDLE

    def activate_commit(self) -> Optional[TreeNode]:
        """Explicit commit control. Returns the inserted node, if any."""
        event = self.gesture.commit()
        if event is None:
            return None
        return self._last_commit_result

    def cancel_gesture(self) -> None:
        self.gesture.reset()
        self.phase = SessionPhase.IDLE

    # ------------------------------------------------------------------
    # Commit handling
    # ------------------------------------------------------------------

    def submit(self, event: WordCommitted) -> TreeNode:
        """
        Validate and insert a committed word.

        Raises:
            InvalidWord: The word is unknown (DictionaryUnavailable while the
                word list is still loading).
            DuplicateWord: The word was already used this session.
        """
        word = event.word.upper()

        if not self.dictionary.loaded:
            raise DictionaryUnavailable(word)
        if not self.dictionary.is_valid_word(word):
            raise InvalidWord(word)
        if word in self.used_words:
            raise DuplicateWord(word)

        parent_id = self.last_inserted_id if self.attach_policy is AttachPolicy.CHAIN else self.current_node_id
        node = self.tree.insert(parent_id, event.slots)
        self.used_words.add(word)
        self.current_node_id = node.id
        self.last_inserted_id = node.id

        self.recompute()
        self._update_availability()
        logger.info(f"Accepted '{word}' under '{self.tree.node(parent_id).word}', score is {self.score}.")
        return node

    def handle_commit(self, event: WordCommitted) -> Optional[TreeNode]:
        """Gesture listener: submit, turning rejections into notifications."""
        self._last_commit_result = None
        try:
            node = self.submit(event)
        except WordRejected as e:
            self.phase = SessionPhase.REJECTED
            logger.info(f"Rejected '{e.word}': {e}")
            for listener in self._reject_listeners:
                listener(e)
        else:
            self.phase = SessionPhase.COMMITTED
            self._last_commit_result = node
            for listener in self._commit_listeners:
                listener(node)
        self.phase = SessionPhase.IDLE
        return self._last_commit_result

    # ------------------------------------------------------------------
    # Node selection & letter availability
    # ------------------------------------------------------------------

    def select_node(self, ref: NodeRef) -> TreeNode:
        """
        Make `ref` the current node (the one new words attach under).

        Raises:
            InvalidParent: If the node is not part of the tree.
        """
        node = self.tree.node(ref)
        if self.attach_policy is AttachPolicy.CHAIN and node.id != self.last_inserted_id:
            logger.info(f"Chain mode: ignoring selection of '{node.word}'.")
            return self.current_node

        self.gesture.reset()
        self.current_node_id = node.id
        self._update_availability()
        logger.debug(f"Selected node '{node.word}' (id {node.id}).")
        return node

    def _update_availability(self) -> None:
        node = self.current_node
        used: list[LetterSlot] = []
        if self.availability_policy is AvailabilityPolicy.MARK_CHILD_SLOTS_USED:
            for child in self.tree.children_of(node):
                used.extend(child.slots)
        self.ring.update_availability(node.slots, used)

        for listener in self._availability_listeners:
            listener()
