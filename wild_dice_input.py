# wild_dice_input.py — polled key state to "pressed this tick" events
#
# KeyState turns the MacroPad's keypad event queue back into a held-key
# snapshot plus a "something changed" flag, once per loop. EdgeDetector
# diffs successive snapshots so a held key fires exactly once per press.

from wild_dice_config import debug_print

class EdgeDetector:
    def __init__(self):
        self.previous = frozenset()

    def update(self, changed, held):
        """Keys in `held` that were not held last time. Releases are ignored."""
        if not changed:
            return set()
        current = frozenset(held)
        new = set(current - self.previous)
        self.previous = current
        if new:
            debug_print("[input] new:", sorted(new))
        return new

    def reset(self):
        self.previous = frozenset()

class KeyState:
    def __init__(self):
        self.held = set()
        self._changed = False

    def feed(self, key, pressed):
        if pressed:
            if key not in self.held:
                self.held.add(key)
                self._changed = True
        elif key in self.held:
            self.held.discard(key)
            self._changed = True

    def feed_event(self, ev):
        self.feed(ev.key_number, ev.pressed)

    def drain(self, events):
        # Same loop as the launcher's flush: get() until the queue is empty
        while True:
            ev = events.get()
            if not ev:
                break
            self.feed_event(ev)

    def poll(self):
        changed = self._changed
        self._changed = False
        return changed, frozenset(self.held)

    def clear(self):
        if self.held:
            self._changed = True
        self.held.clear()
