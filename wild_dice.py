# ---------- Main ----------
# wild_dice.py — Wild Dice (CircuitPython 9.x, Adafruit MacroPad)
#
# Exploding-dice roller with a wild d6. Keys build the pool, the encoder
# nudges the modifier, ROLL (or an encoder press) rolls.
#
# Controls:
#   K0..K4  d4 d6 d8 d10 d12 +1   (hold K9 SHIFT for -1)
#   K5 wild on/off   K6 explode on/off
#   K7 mod +1        K8 mod -1
#   K10 reset        K11 roll
#   Encoder turn → modifier, encoder press → roll
#
# Exposes: .group, .new_game(), .update(changed, held), .tick(),
#          .encoderChange(pos, last_pos), .encoder_button(pressed), .cleanup()

import random as _random

import wild_dice_config as cfg
from wild_dice_input import EdgeDetector
from wild_dice_session import RollSession

class wild_dice:
    def __init__(self, macropad=None, ui=None, rng=None, **kwargs):
        self.macropad = macropad
        self.rng = rng if rng is not None else _random
        if ui is None:
            import wild_dice_ui
            ui = wild_dice_ui.UI(macropad)
        self.ui = ui
        self.group = getattr(ui, "group", None)

        self.session = RollSession()
        self.edges = EdgeDetector()
        self.held = frozenset()
        self._dirty = True

    # Launcher API
    def new_game(self, **kwargs):
        self.session = RollSession()
        self.edges.reset()
        self.held = frozenset()
        self._dirty = True
        self._redraw()

    def cleanup(self):
        self.ui.cleanup()

    # ----- Input -----
    def update(self, changed, held):
        """One tick of polled input: apply each newly pressed key once."""
        new = self.edges.update(changed, held)
        if changed:
            self.held = frozenset(held)
            # SHIFT has its own LED state even without a command
            self._dirty = True
        shift = cfg.K_SHIFT in self.held
        for k in sorted(new):
            self._dispatch(k, shift)
        if self._dirty:
            self._redraw()

    def _dispatch(self, k, shift):
        s = self.session
        if k in cfg.DIE_KEYS:
            changed = s.change_count(cfg.DIE_KEYS[k], -1 if shift else 1)
        elif k == cfg.K_WILD:
            changed = s.toggle_wild()
        elif k == cfg.K_EXPLODE:
            changed = s.toggle_explode()
        elif k == cfg.K_MOD_UP:
            changed = s.change_modifier(1)
        elif k == cfg.K_MOD_DOWN:
            changed = s.change_modifier(-1)
        elif k == cfg.K_RESET:
            changed = s.reset()
        elif k == cfg.K_ROLL:
            changed = self.roll()
        else:
            return
        if changed:
            self._dirty = True

    def roll(self):
        outcome = self.session.roll(self.rng)
        if outcome is None:
            return False
        print("[roll]", outcome.total, "crit" if self.session.crit else "")
        if self.session.crit:
            self.ui.start_crit_pulse()
        self._dirty = True
        return True

    def encoderChange(self, pos, last_pos):
        if self.session.change_modifier(pos - last_pos):
            self._redraw()

    def encoder_button(self, pressed):
        if pressed and self.roll():
            self._redraw()

    # ----- Frame -----
    def tick(self, now=None):
        self.ui.tick(self.session, self.held, now)

    def _redraw(self):
        self._dirty = False
        self.ui.render(self.session)
        self.ui.update_leds(self.session, self.held)
