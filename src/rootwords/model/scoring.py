"""
Scoring Engine
==============
Rewards deep chains of words that keep reusing letters unlocked near the root.

For every letter slot the deepest tree level that consumed it is recorded.
Those depths are sorted ascending and weighted N, N-1, ..., 1 (N = number of
slots), so the shallowest entries carry the biggest weights:

    score = sum(depth[i] * (N - i))
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from rootwords.model.ring import SlotId
    from rootwords.model.tree import DerivationTree


def max_slot_depths(tree: DerivationTree) -> dict[SlotId, int]:
    """Deepest depth at which each slot is consumed by any node."""
    depths: dict[SlotId, int] = {}
    for node, depth in tree.walk():
        for slot in node.slots:
            if depth > depths.get(slot.id, -1):
                depths[slot.id] = depth
    return depths


def score_depths(depths) -> int:
    """Weighted sum of sorted depths, the shallowest weighted highest."""
    values = np.sort(np.asarray(list(depths), dtype=np.int64))
    if values.size == 0:
        return 0
    weights = np.arange(values.size, 0, -1, dtype=np.int64)
    return int(np.dot(values, weights))


def compute_score(tree: DerivationTree) -> int:
    return score_depths(max_slot_depths(tree).values())
