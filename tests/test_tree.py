import pytest

from rootwords.model.errors import InvalidParent
from rootwords.model.ring import LetterRing
from rootwords.model.tree import DerivationTree, NodeId


@pytest.fixture
def tree(ring):
    tree = DerivationTree()
    tree.create_root(ring.slots)
    return tree


def slots_for(ring, letters):
    return [next(s for s in ring.slots if s.letter == ch) for ch in letters]


def test_root_is_the_full_letter_set(ring, tree):
    assert tree.root.word == "STAR"
    assert tree.root.is_root
    assert tree.root.slots == tuple(ring.slots)
    assert tree.depth_of(tree.root) == 0
    assert len(tree) == 1


def test_only_one_root(ring, tree):
    with pytest.raises(RuntimeError):
        tree.create_root(ring.slots)


def test_insert_links_parent_and_child(ring, tree):
    child = tree.insert(tree.root, slots_for(ring, "RAT"))
    grandchild = tree.insert(child.id, slots_for(ring, "AT"))

    assert child.word == "RAT"
    assert child.parent == tree.root.id
    assert tree.root.children == [child.id]
    assert tree.parent_of(grandchild) is child
    assert tree.depth_of(child) == tree.depth_of(tree.root) + 1
    assert tree.depth_of(grandchild) == tree.depth_of(child) + 1
    # slots are shared with the ring, not copied
    assert child.slots[0] is ring.slots[3]


def test_children_keep_insertion_order(ring, tree):
    words = ["TAR", "ART", "RAT"]
    for word in words:
        tree.insert(tree.root, slots_for(ring, word))
    assert [child.word for child in tree.children_of(tree.root)] == words


def test_insert_under_foreign_node_fails(ring, tree):
    other = DerivationTree()
    foreign_root = other.create_root(LetterRing(["A", "B"]).slots)
    with pytest.raises(InvalidParent):
        tree.insert(foreign_root, slots_for(ring, "AT"))
    with pytest.raises(InvalidParent):
        tree.insert(NodeId(42), slots_for(ring, "AT"))
    assert len(tree) == 1


def test_insert_needs_letters(tree):
    with pytest.raises(ValueError):
        tree.insert(tree.root, [])


def test_walk_orders(ring, tree):
    star = tree.root
    rat = tree.insert(star, slots_for(ring, "RAT"))
    at = tree.insert(rat, slots_for(ring, "AT"))
    sat = tree.insert(star, slots_for(ring, "SAT"))

    pre = [(node.word, depth) for node, depth in tree.walk()]
    assert pre == [("STAR", 0), ("RAT", 1), ("AT", 2), ("SAT", 1)]

    level = [(node.word, depth) for node, depth in tree.walk(order="level")]
    assert level == [("STAR", 0), ("RAT", 1), ("SAT", 1), ("AT", 2)]

    assert tree.words() == ["RAT", "AT", "SAT"]
    assert [node.id for node in tree] == [star.id, rat.id, at.id, sat.id]


def test_walk_is_restartable(ring, tree):
    tree.insert(tree.root, slots_for(ring, "RAT"))
    assert list(tree.walk()) == list(tree.walk())


def test_membership(ring, tree):
    child = tree.insert(tree.root, slots_for(ring, "AT"))
    assert child in tree
    assert child.id in tree
    assert NodeId(7) not in tree


def test_empty_tree():
    tree = DerivationTree()
    assert tree.is_empty
    assert list(tree.walk()) == []
    with pytest.raises(LookupError):
        tree.root
