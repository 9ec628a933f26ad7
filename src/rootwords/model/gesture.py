"""
Gesture Selector
================
Turns continuous pointer movement over the letter ring into an ordered,
duplicate-free sequence of letter slots.

Lifecycle of one gesture:
    start(point)  -> clears the previous selection, becomes active and
                     hit-tests the starting point
    move(point)   -> appends newly touched slots; touching the commit slot
                     commits the selection
    end(point)    -> becomes inactive, the selection stays visible so it can
                     still be committed with `commit()`

Listeners registered with `add_commit_listener` receive a `WordCommitted`
event. Change listeners are called whenever the selection changes.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from rootwords.model.geometry import Point
from rootwords.model.ring import LetterRing, LetterSlot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordCommitted:
    """Output event: the committed letters and the slots they came from."""
    word: str
    slots: tuple[LetterSlot, ...]


@dataclass
class GestureState:
    """Transient state of the gesture in progress."""
    active: bool = False
    selected: list[LetterSlot] = field(default_factory=list)

    @property
    def word(self) -> str:
        return "".join(slot.letter for slot in self.selected)

    def clear(self) -> None:
        self.selected.clear()


CommitListener = Callable[[WordCommitted], None]
ChangeListener = Callable[[GestureState], None]


class GestureSelector:
    def __init__(self, ring: LetterRing) -> None:
        self.ring = ring
        self.state = GestureState()
        self._commit_listeners: list[CommitListener] = []
        self._change_listeners: list[ChangeListener] = []

    # ---- listeners ----

    def add_commit_listener(self, listener: CommitListener) -> None:
        self._commit_listeners.append(listener)

    def add_change_listener(self, listener: ChangeListener) -> None:
        self._change_listeners.append(listener)

    def _notify_changed(self) -> None:
        for listener in self._change_listeners:
            listener(self.state)

    # ---- read-only views ----

    @property
    def active(self) -> bool:
        return self.state.active

    @property
    def selection(self) -> tuple[LetterSlot, ...]:
        return tuple(self.state.selected)

    @property
    def word(self) -> str:
        return self.state.word

    def path_points(self) -> list[Point]:
        """Centres of the selected slots, in selection order."""
        return [slot.position for slot in self.state.selected]

    # ---- pointer input ----

    def start(self, point: Point) -> None:
        self._clear_selection()
        self.state.active = True
        self.move(point)

    def move(self, point: Point) -> None:
        if not self.state.active:
            return

        slot = self.ring.hit_test(point)
        if slot is None:
            return
        if slot.is_commit:
            self.commit()
            return
        if slot in self.state.selected:
            # no backtracking
            return

        self.state.selected.append(slot)
        logger.debug(f"Selected '{slot.letter}' (slot {slot.id}), word is now '{self.word}'")
        self._notify_changed()

    def end(self, point: Optional[Point] = None) -> None:
        self.state.active = False

    def reset(self) -> None:
        """Cancel: drop the selection and deactivate."""
        self.state.active = False
        self._clear_selection()

    # ---- commit ----

    def commit(self) -> Optional[WordCommitted]:
        """
        Emit the current selection as a `WordCommitted` event and clear it.

        An empty selection is ignored and returns None.
        """
        if not self.state.selected:
            return None

        event = WordCommitted(word=self.word, slots=tuple(self.state.selected))
        for listener in self._commit_listeners:
            listener(event)
        self._clear_selection()
        return event

    def _clear_selection(self) -> None:
        had_selection = bool(self.state.selected)
        self.state.clear()
        if had_selection:
            self._notify_changed()
