"""
Letter Ring
===========
The fixed circular arrangement of root letters plus one central commit slot.

The ring owns its LetterSlot objects. Tree nodes and gestures keep references
to them (never copies), so a slot's identity is stable for a whole game.
"""
from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, NewType, Optional

import numpy as np

from rootwords import config
from rootwords.model.geometry import Point, circle_positions, nearest_within

logger = logging.getLogger(__name__)

SlotId = NewType("SlotId", int)

# Ids are never reused, so slots of a rebuilt ring can't be mistaken for old ones
_slot_ids = itertools.count()


@dataclass(eq=False)
class LetterSlot:
    """One ring position. Compared and hashed by identity."""
    id: SlotId
    letter: str
    position: Point
    available: bool = True
    used: bool = False
    is_commit: bool = False

    def __repr__(self) -> str:
        return f"LetterSlot(id={self.id}, letter={self.letter!r})"


def parse_letters(value: Optional[str]) -> list[str]:
    """
    Parse a ring configuration value into upper-case letters.

    "S,T,A,R" and "STAR" both give ["S", "T", "A", "R"].
    """
    if not value:
        return []
    if "," in value:
        return normalize_letters(value.split(","))
    return normalize_letters(ch for ch in value if not ch.isspace())


def normalize_letters(parts: Iterable[str]) -> list[str]:
    """Trim and upper-case each letter, dropping blank entries."""
    return [part.strip().upper() for part in parts if part and part.strip()]


class LetterRing:
    """
    Letter slots laid out on a circle, first slot at the top, commit slot at
    the centre.
    """
    def __init__(
        self,
        letters: Iterable[str],
        center: tuple[float, float] = config.RING_CENTER,
        radius: float = config.RING_RADIUS,
        hit_radius: float = config.SLOT_HIT_RADIUS,
    ) -> None:
        letters = list(letters)
        self.center = Point(*center)
        self.radius = radius
        self.hit_radius = hit_radius

        positions = circle_positions(center, radius, len(letters))
        self.slots: list[LetterSlot] = [
            LetterSlot(SlotId(next(_slot_ids)), letter, Point(float(x), float(y)))
            for letter, (x, y) in zip(letters, positions)
        ]
        self.commit_slot = LetterSlot(SlotId(next(_slot_ids)), config.COMMIT_GLYPH, self.center, is_commit=True)

        self._by_id = {slot.id: slot for slot in self.all_slots}
        logger.debug(f"Ring laid out with {len(self.slots)} letters: {self.word}")

    # ---- access ----

    @property
    def all_slots(self) -> list[LetterSlot]:
        """Letter slots followed by the commit slot."""
        return [*self.slots, self.commit_slot]

    @property
    def letters(self) -> list[str]:
        return [slot.letter for slot in self.slots]

    @property
    def word(self) -> str:
        return "".join(self.letters)

    def __len__(self) -> int:
        return len(self.slots)

    def __iter__(self) -> Iterator[LetterSlot]:
        return iter(self.slots)

    def __contains__(self, slot: object) -> bool:
        return isinstance(slot, LetterSlot) and self._by_id.get(slot.id) is slot

    # ---- hit testing ----

    def hit_test(self, point: Point) -> Optional[LetterSlot]:
        """
        The slot under `point`, or None.

        Disabled letter slots are transparent to hit testing. The commit slot
        can always be hit.
        """
        candidates = [slot for slot in self.all_slots if slot.available or slot.is_commit]
        if not candidates:
            return None
        centers = np.array([slot.position.to_array() for slot in candidates])
        index = nearest_within(centers, point, self.hit_radius)
        return None if index is None else candidates[index]

    # ---- availability ----

    def update_availability(self, enabled: Iterable[LetterSlot], used: Iterable[LetterSlot] = ()) -> None:
        """
        Enable exactly the `enabled` slots. Slots in `used` are marked used and
        disabled, even when they are also in `enabled`.
        """
        enabled_ids = {slot.id for slot in enabled}
        used_ids = {slot.id for slot in used}
        for slot in self.slots:
            slot.used = slot.id in used_ids
            slot.available = slot.id in enabled_ids and not slot.used
