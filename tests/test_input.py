"""Unit tests for edge detection and held-key tracking."""

from collections import namedtuple

from wild_dice_input import EdgeDetector, KeyState

Event = namedtuple("Event", ("key_number", "pressed"))


class FakeQueue:
    def __init__(self, events):
        self.events = list(events)

    def get(self):
        return self.events.pop(0) if self.events else None


class TestEdgeDetector:
    def test_new_key_fires(self):
        d = EdgeDetector()
        d.update(True, {"a"})
        assert d.update(True, {"a", "b"}) == {"b"}

    def test_same_set_is_empty(self):
        d = EdgeDetector()
        d.update(True, {"a"})
        assert d.update(True, {"a"}) == set()

    def test_release_is_not_an_event(self):
        d = EdgeDetector()
        d.update(True, {"a"})
        assert d.update(True, set()) == set()

    def test_held_key_fires_once(self):
        d = EdgeDetector()
        assert d.update(True, {1}) == {1}
        for _ in range(5):
            assert d.update(True, {1}) == set()

    def test_unchanged_leaves_previous(self):
        d = EdgeDetector()
        d.update(True, {1})
        assert d.update(False, {1, 2}) == set()
        assert d.previous == frozenset({1})
        assert d.update(True, {1, 2}) == {2}

    def test_press_release_press(self):
        d = EdgeDetector()
        assert d.update(True, {3}) == {3}
        assert d.update(True, set()) == set()
        assert d.update(True, {3}) == {3}

    def test_empty_sets(self):
        d = EdgeDetector()
        assert d.update(True, set()) == set()

    def test_reset(self):
        d = EdgeDetector()
        d.update(True, {1})
        d.reset()
        assert d.update(True, {1}) == {1}


class TestKeyState:
    def test_poll_reports_change_once(self):
        ks = KeyState()
        ks.feed(4, True)
        assert ks.poll() == (True, frozenset({4}))
        assert ks.poll() == (False, frozenset({4}))

    def test_drain_queue(self):
        ks = KeyState()
        ks.drain(FakeQueue([Event(1, True), Event(9, True), Event(1, False)]))
        assert ks.poll() == (True, frozenset({9}))

    def test_duplicate_press_is_not_a_change(self):
        ks = KeyState()
        ks.feed(2, True)
        ks.poll()
        ks.feed(2, True)
        assert ks.poll()[0] is False

    def test_release_of_unknown_key(self):
        ks = KeyState()
        ks.feed(7, False)
        assert ks.poll() == (False, frozenset())

    def test_clear(self):
        ks = KeyState()
        ks.feed(0, True)
        ks.poll()
        ks.clear()
        assert ks.poll() == (True, frozenset())

    def test_drives_detector(self):
        ks, d = KeyState(), EdgeDetector()
        fired = []
        for ev in ([Event(0, True)], [], [Event(0, False)], [Event(0, True)]):
            ks.drain(FakeQueue(ev))
            fired.append(d.update(*ks.poll()))
        assert fired == [{0}, set(), set(), {0}]
