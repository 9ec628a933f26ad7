"""
Derivation Tree
===============
Records which words were built from which earlier words.

The root stands for the full root-letter set; every other node is one
committed word. Nodes live in an arena owned by the tree and refer to each
other by NodeId, so parent/child links never form object reference cycles.
"""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator, NewType, Optional, Union

from rootwords.model.errors import InvalidParent
from rootwords.model.ring import LetterSlot

logger = logging.getLogger(__name__)

NodeId = NewType("NodeId", int)


@dataclass(eq=False)
class TreeNode:
    id: NodeId
    slots: tuple[LetterSlot, ...]
    parent: Optional[NodeId] = None
    children: list[NodeId] = field(default_factory=list)

    @property
    def word(self) -> str:
        return "".join(slot.letter for slot in self.slots)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def __repr__(self) -> str:
        return f"TreeNode(id={self.id}, word={self.word!r}, parent={self.parent})"


NodeRef = Union[TreeNode, NodeId, int]


class DerivationTree:
    """Arena of TreeNodes with a single root."""

    def __init__(self) -> None:
        self._nodes: list[TreeNode] = []

    # ---- construction ----

    def create_root(self, slots: Iterable[LetterSlot]) -> TreeNode:
        if self._nodes:
            raise RuntimeError("The derivation tree already has a root.")
        root = TreeNode(id=NodeId(0), slots=tuple(slots))
        self._nodes.append(root)
        logger.debug(f"Created root '{root.word}'")
        return root

    def insert(self, parent: NodeRef, slots: Iterable[LetterSlot]) -> TreeNode:
        """
        Append a new node built from `slots` as the last child of `parent`.

        Raises:
            InvalidParent: If `parent` does not belong to this tree.
            ValueError: If `slots` is empty.
        """
        parent_node = self.node(parent)
        slots = tuple(slots)
        if not slots:
            raise ValueError("A word needs at least one letter slot.")

        node = TreeNode(id=NodeId(len(self._nodes)), slots=slots, parent=parent_node.id)
        self._nodes.append(node)
        parent_node.children.append(node.id)
        logger.debug(f"Inserted '{node.word}' under '{parent_node.word}'")
        return node

    # ---- lookup ----

    @property
    def root(self) -> TreeNode:
        if not self._nodes:
            raise LookupError("The derivation tree has no root yet.")
        return self._nodes[0]

    @property
    def is_empty(self) -> bool:
        return not self._nodes

    def node(self, ref: NodeRef) -> TreeNode:
        """
        Resolve a node or node id to the member node.

        Raises:
            InvalidParent: If the reference does not point into this tree.
        """
        if isinstance(ref, TreeNode):
            index = ref.id
            if 0 <= index < len(self._nodes) and self._nodes[index] is ref:
                return ref
        elif isinstance(ref, int) and 0 <= ref < len(self._nodes):
            return self._nodes[ref]
        raise InvalidParent(f"{ref!r} is not a node of this tree.")

    def __contains__(self, ref: object) -> bool:
        try:
            self.node(ref)  # type: ignore[arg-type]
        except InvalidParent:
            return False
        return True

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[TreeNode]:
        return (node for node, _ in self.walk())

    def parent_of(self, ref: NodeRef) -> Optional[TreeNode]:
        node = self.node(ref)
        return None if node.parent is None else self._nodes[node.parent]

    def children_of(self, ref: NodeRef) -> list[TreeNode]:
        return [self._nodes[child] for child in self.node(ref).children]

    def depth_of(self, ref: NodeRef) -> int:
        depth = 0
        node = self.node(ref)
        while node.parent is not None:
            node = self._nodes[node.parent]
            depth += 1
        return depth

    def words(self) -> list[str]:
        """Words of all non-root nodes in pre-order."""
        return [node.word for node, depth in self.walk() if depth > 0]

    # ---- traversal ----

    def walk(self, order: str = "pre") -> Iterator[tuple[TreeNode, int]]:
        """
        Lazily yield (node, depth) pairs, children in insertion order.

        Args:
            order: "pre" for depth-first pre-order, "level" for breadth-first.
        """
        if not self._nodes:
            return
        if order == "pre":
            stack = [(self.root, 0)]
            while stack:
                node, depth = stack.pop()
                yield node, depth
                for child in reversed(node.children):
                    stack.append((self._nodes[child], depth + 1))
        elif order == "level":
            queue = deque([(self.root, 0)])
            while queue:
                node, depth = queue.popleft()
                yield node, depth
                for child in node.children:
                    queue.append((self._nodes[child], depth + 1))
        else:
            raise ValueError(f"Unknown traversal order '{order}'.")
