# wild_dice_session.py — the one roller session and its command surface
#
# Owns the DiceConfig, the RollHistory and the last result. Every command
# clamps instead of failing, and returns True when it changed something so
# the caller knows a redraw is due.

from wild_dice_config import (
    DIE_SIZES, MIN_COUNT, MAX_COUNT, MIN_MOD, MAX_MOD, HISTORY_SIZE, debug_print,
)
from wild_dice_engine import DiceConfig, RollHistory, roll_all, is_critical_fail

def _clamp(v, lo, hi):
    return lo if v < lo else hi if v > hi else v

class RollSession:
    def __init__(self, history_size=HISTORY_SIZE):
        self.config = DiceConfig()
        self.history = RollHistory(history_size)
        self.outcome = None
        self.crit = False
        self.has_result = False

    # ----- Counters -----
    def change_count(self, size, delta):
        if size not in DIE_SIZES:
            raise ValueError("unsupported die size: d{}".format(size))
        old = self.config.counts[size]
        new = _clamp(old + delta, MIN_COUNT, MAX_COUNT)
        self.config.counts[size] = new
        return new != old

    def change_modifier(self, delta):
        old = self.config.plus_or_minus
        self.config.plus_or_minus = _clamp(old + delta, MIN_MOD, MAX_MOD)
        return self.config.plus_or_minus != old

    # ----- Toggles -----
    def toggle_wild(self):
        self.config.include_wild = not self.config.include_wild
        return True

    def toggle_explode(self):
        self.config.allow_explode = not self.config.allow_explode
        return True

    def reset(self):
        # Counters, modifier and the shown result go together; flags and
        # history survive a reset.
        for size in DIE_SIZES:
            self.config.counts[size] = 0
        self.config.plus_or_minus = 0
        self.outcome = None
        self.crit = False
        self.has_result = False
        return True

    def total_dice(self):
        return self.config.total_dice()

    # ----- Roll -----
    def roll(self, rng):
        """Roll the configured pool. No dice means no roll: returns None."""
        if self.total_dice() == 0:
            debug_print("[roll] ignored, no dice")
            return None
        outcome = roll_all(self.config, rng)
        self.outcome = outcome
        self.crit = is_critical_fail(outcome, self.config)
        self.has_result = True
        self.history.push_front(outcome.total)
        return outcome
