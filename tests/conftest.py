import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from rootwords.controller.session import SelectionController
from rootwords.model.dictionary import WordDictionary
from rootwords.model.ring import LetterRing

LETTERS = "S,T,A,R,L,I,N,G"
WORDS = [
    "star", "stair", "tar", "rat", "art", "sat", "at", "as", "a", "sit", "its", "tin", "ting",
    "sting", "string", "starling", "rain", "train", "grain", "sling", "slit", "lint", "nail",
    "gain", "gas", "snag", "list", "last", "salt", "gin", "ling",
]


@pytest.fixture
def dictionary() -> WordDictionary:
    return WordDictionary(WORDS)


@pytest.fixture
def ring() -> LetterRing:
    return LetterRing(["S", "T", "A", "R"])


@pytest.fixture
def controller(dictionary) -> SelectionController:
    return SelectionController(dictionary, LETTERS)


@pytest.fixture
def swipe():
    """Drag over the given letters of the controller's ring, release, then press Enter."""
    def _swipe(controller: SelectionController, letters: str, commit: bool = True):
        slots = [next(s for s in controller.ring.slots if s.letter == ch) for ch in letters.upper()]
        first, *rest = slots
        controller.pointer_down(first.position)
        for slot in rest:
            controller.pointer_move(slot.position)
        controller.pointer_up(rest[-1].position if rest else first.position)
        if commit:
            return controller.activate_commit()
        return None
    return _swipe
