import pytest

from rootwords.model.gesture import GestureSelector
from rootwords.model.geometry import Point


@pytest.fixture
def selector(ring):
    return GestureSelector(ring)


@pytest.fixture
def committed(selector):
    events = []
    selector.add_commit_listener(events.append)
    return events


def pos(ring, letter):
    return next(slot.position for slot in ring.slots if slot.letter == letter)


def test_selection_follows_pointer_order(ring, selector):
    selector.start(pos(ring, "R"))
    selector.move(pos(ring, "A"))
    selector.move(pos(ring, "T"))
    assert selector.active
    assert selector.word == "RAT"
    assert [slot.letter for slot in selector.selection] == ["R", "A", "T"]
    assert selector.path_points() == [pos(ring, "R"), pos(ring, "A"), pos(ring, "T")]


def test_reselecting_a_slot_is_a_no_op(ring, selector):
    selector.start(pos(ring, "S"))
    selector.move(pos(ring, "T"))
    selector.move(pos(ring, "S"))
    selector.move(pos(ring, "T"))
    assert selector.word == "ST"


def test_moving_over_empty_space_selects_nothing(ring, selector):
    selector.start(Point(0.0, 0.0))
    selector.move(Point(80.0, 80.0))
    assert selector.active
    assert selector.selection == ()


def test_move_without_start_is_ignored(ring, selector):
    selector.move(pos(ring, "S"))
    assert selector.selection == ()


def test_reaching_commit_slot_emits_and_clears(ring, selector, committed):
    selector.start(pos(ring, "S"))
    selector.move(pos(ring, "A"))
    selector.move(ring.center)

    assert len(committed) == 1
    event = committed[0]
    assert event.word == "SA"
    assert event.slots == (ring.slots[0], ring.slots[2])
    assert selector.selection == ()
    # still dragging after the commit
    assert selector.active


def test_selection_is_cleared_after_listeners_run(ring, selector):
    seen = []
    selector.add_commit_listener(lambda event: seen.append((event.word, selector.word)))
    changes = []
    selector.add_change_listener(lambda state: changes.append(state.word))

    selector.start(pos(ring, "T"))
    selector.move(pos(ring, "A"))
    selector.commit()

    assert seen == [("TA", "TA")]
    assert changes == ["T", "TA", ""]
    assert selector.word == ""


def test_committing_empty_selection_does_nothing(ring, selector, committed):
    assert selector.commit() is None
    selector.start(ring.center)
    assert committed == []


def test_end_keeps_selection_for_explicit_commit(ring, selector, committed):
    selector.start(pos(ring, "T"))
    selector.move(pos(ring, "A"))
    selector.end(pos(ring, "A"))

    assert not selector.active
    assert selector.word == "TA"
    selector.move(pos(ring, "R"))
    assert selector.word == "TA"

    event = selector.commit()
    assert event is not None and event.word == "TA"
    assert committed == [event]
    assert selector.word == ""


def test_single_letter_gesture_can_be_committed(ring, selector, committed):
    selector.start(pos(ring, "A"))
    selector.end()
    selector.commit()
    assert [e.word for e in committed] == ["A"]


def test_start_clears_previous_selection(ring, selector):
    selector.start(pos(ring, "S"))
    selector.move(pos(ring, "T"))
    selector.end()
    selector.start(pos(ring, "R"))
    assert selector.word == "R"


def test_reset_cancels_gesture(ring, selector, committed):
    selector.start(pos(ring, "S"))
    selector.reset()
    assert not selector.active
    assert selector.commit() is None
    assert committed == []


def test_change_listener_sees_every_selection_change(ring, selector):
    words = []
    selector.add_change_listener(lambda state: words.append(state.word))
    selector.start(pos(ring, "S"))
    selector.move(pos(ring, "T"))
    selector.move(pos(ring, "T"))
    selector.commit()
    assert words == ["S", "ST", ""]
