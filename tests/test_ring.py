import pytest

from rootwords import config
from rootwords.model.geometry import Point
from rootwords.model.ring import LetterRing, normalize_letters, parse_letters


@pytest.mark.parametrize("parts, expected", [
    (["s", " t ", "A"], ["S", "T", "A"]),
    (["", " ", "r"], ["R"]),
    ([], []),
])
def test_normalize_letters(parts, expected):
    assert normalize_letters(parts) == expected


@pytest.mark.parametrize("value, expected", [
    ("S,T,A,R", ["S", "T", "A", "R"]),
    (" s , t,,a ", ["S", "T", "A"]),
    ("star", ["S", "T", "A", "R"]),
    ("st ar", ["S", "T", "A", "R"]),
    ("", []),
    (None, []),
])
def test_parse_letters(value, expected):
    assert parse_letters(value) == expected


def test_slots_are_placed_clockwise_from_the_top(ring):
    top, right, bottom, left = ring.slots
    assert (top.position.x, top.position.y) == pytest.approx((150.0, 30.0))
    assert (right.position.x, right.position.y) == pytest.approx((270.0, 150.0))
    assert (bottom.position.x, bottom.position.y) == pytest.approx((150.0, 270.0))
    assert (left.position.x, left.position.y) == pytest.approx((30.0, 150.0))


def test_commit_slot_sits_in_the_centre(ring):
    assert ring.commit_slot.is_commit
    assert ring.commit_slot.letter == config.COMMIT_GLYPH
    assert ring.commit_slot.position == Point(150.0, 150.0)
    assert ring.commit_slot not in ring.slots
    assert ring.word == "STAR"


def test_slot_ids_are_unique_across_rings(ring):
    other = LetterRing(["S", "T", "A", "R"])
    ids = {slot.id for slot in ring.all_slots} | {slot.id for slot in other.all_slots}
    assert len(ids) == 10
    assert ring.slots[0] in ring
    assert other.slots[0] not in ring


def test_hit_test_finds_nearest_slot_within_radius(ring):
    assert ring.hit_test(Point(152.0, 35.0)) is ring.slots[0]
    assert ring.hit_test(Point(150.0, 150.0)) is ring.commit_slot
    assert ring.hit_test(Point(80.0, 80.0)) is None
    assert ring.hit_test(Point(-500.0, 0.0)) is None


def test_commit_glyph_as_a_letter_is_an_ordinary_slot():
    ring = LetterRing(["A", config.COMMIT_GLYPH])
    glyph = ring.slots[1]
    assert not glyph.is_commit
    assert [slot.is_commit for slot in ring.all_slots] == [False, False, True]

    ring.update_availability(enabled=ring.slots[:1])
    assert ring.hit_test(glyph.position) is None
    assert ring.hit_test(ring.center) is ring.commit_slot


def test_disabled_slots_cannot_be_hit(ring):
    ring.update_availability(enabled=ring.slots[1:])
    assert ring.hit_test(ring.slots[0].position) is None
    assert ring.hit_test(ring.slots[1].position) is ring.slots[1]


def test_commit_slot_is_always_hittable(ring):
    ring.update_availability(enabled=[])
    assert ring.hit_test(ring.center) is ring.commit_slot


def test_used_slots_are_disabled(ring):
    s, t, a, r = ring.slots
    ring.update_availability(enabled=[s, t, a], used=[t])
    assert [slot.available for slot in ring.slots] == [True, False, True, False]
    assert [slot.used for slot in ring.slots] == [False, True, False, False]


def test_empty_ring():
    ring = LetterRing(parse_letters(""))
    assert len(ring) == 0
    assert ring.word == ""
    assert ring.hit_test(Point(150.0, 30.0)) is None
