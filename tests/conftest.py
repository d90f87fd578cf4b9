"""Shared fakes for the Wild Dice tests.

SequenceRng   replays a fixed list of draws through randint(), and records
              every (lo, hi) it was asked for.
FakeUI        stands in for wild_dice_ui.UI so the controller runs without
              displayio or a MacroPad.
"""

import pytest


class SequenceRng:
    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, lo, hi):
        self.calls.append((lo, hi))
        if not self.values:
            raise AssertionError("rng exhausted")
        v = self.values.pop(0)
        assert lo <= v <= hi, "rigged value {} outside [{}, {}]".format(v, lo, hi)
        return v


class FakeUI:
    def __init__(self):
        self.group = object()
        self.renders = 0
        self.led_updates = 0
        self.crit_pulses = 0
        self.ticks = 0
        self.cleaned = False

    def render(self, session):
        self.renders += 1

    def update_leds(self, session, held=()):
        self.led_updates += 1

    def start_crit_pulse(self):
        self.crit_pulses += 1

    def tick(self, session, held=(), now=None):
        self.ticks += 1

    def cleanup(self):
        self.cleaned = True


@pytest.fixture
def fake_ui():
    return FakeUI()
