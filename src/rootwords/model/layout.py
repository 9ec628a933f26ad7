"""
Layout Engine
=============
Places every tree node on a grid: row = depth, and a contiguous column range
as wide as the node's word.

Children are tiled left to right starting at their parent's own column start;
each child reserves only its own word length, so a deep subtree may reach
past its parent's range. The result is a pure function of the tree.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rootwords.model.tree import DerivationTree, NodeId, TreeNode


@dataclass(frozen=True)
class LayoutEntry:
    row: int
    column_start: int
    column_span: int

    @property
    def column_end(self) -> int:
        """First column after the span."""
        return self.column_start + self.column_span


Layout = dict["NodeId", LayoutEntry]


def compute_layout(tree: DerivationTree) -> Layout:
    """
    Compute a LayoutEntry per node id.

    Returns:
        Mapping NodeId -> LayoutEntry, in pre-order. Empty for a tree without root.
    """
    layout: Layout = {}
    if tree.is_empty:
        return layout

    def place(node: TreeNode, row: int, column: int) -> None:
        layout[node.id] = LayoutEntry(row=row, column_start=column, column_span=len(node.slots))
        cursor = column
        for child in tree.children_of(node):
            place(child, row + 1, cursor)
            cursor += len(child.slots)

    place(tree.root, 0, 0)
    return layout


def layout_extent(layout: Layout) -> tuple[int, int]:
    """(number of rows, number of columns) covered by a layout."""
    if not layout:
        return 0, 0
    rows = max(entry.row for entry in layout.values()) + 1
    columns = max(entry.column_end for entry in layout.values())
    return rows, columns
