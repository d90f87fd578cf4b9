# wild_dice_ui.py — display + key LEDs for Wild Dice (Adafruit MacroPad)
# Five text rows on the 128×64 OLED, lazy Label import, LED writes only
# when a colour actually changes.
#
#   row 0  summary     "2d6+1d8+2 W X"
#   row 1  total       "Total: 17"
#   row 2  details     "6+6+2, 3, 5  W:4"   (wrapped over two rows)
#   row 4  history     "Prev: 12, 7, 3"

import math
import time
import gc
import displayio, terminalio
from micropython import const

import wild_dice_config as cfg
from wild_dice_text import (
    wrap_lines, glyph_width_measure, fit_summary, fit_history, format_total,
    format_details, result_color,
)

_ROWS = (cfg.ROW_SUMMARY, cfg.ROW_TOTAL, cfg.ROW_DETAIL1, cfg.ROW_DETAIL2, cfg.ROW_HISTORY)
_N_KEYS = const(12)

# ---------- LED helpers ----------
def _scale_color(color, f):
    if f <= 0: return 0
    if f >= 1: return color & 0xFFFFFF
    r = int(((color >> 16) & 0xFF) * f + 0.5)
    g = int(((color >> 8)  & 0xFF) * f + 0.5)
    b = int(( color        & 0xFF) * f + 0.5)
    return (min(r, 255) << 16) | (min(g, 255) << 8) | min(b, 255)

class UI:
    def __init__(self, mac):
        self.mac = mac
        self.group = displayio.Group()
        self.measure = glyph_width_measure(terminalio.FONT)
        self.max_w = cfg.SCREEN_W - 2 * cfg.TEXT_MARGIN

        self._Label = None
        self._rows = []
        self._build_rows()

        # LED cache
        self._led_last = [None] * _N_KEYS
        self._crit_t0 = None
        try:
            self.mac.pixels.auto_write = False
        except AttributeError:
            pass
        try:
            self.mac.pixels.brightness = cfg.LED_BRIGHTNESS
        except AttributeError:
            pass

    def _get_Label(self):
        if self._Label is None:
            from adafruit_display_text import label
            self._Label = label.Label
        return self._Label

    def _build_rows(self):
        while len(self.group):
            self.group.pop()
        gc.collect()
        Label = self._get_Label()
        self._rows = []
        for y in _ROWS:
            lbl = Label(terminalio.FONT, text="", color=cfg.WHITE)
            lbl.anchor_point = (0.0, 0.0)
            lbl.anchored_position = (cfg.TEXT_MARGIN, y)
            self.group.append(lbl)
            self._rows.append(lbl)

    def _set_row(self, idx, text, color=cfg.WHITE):
        lbl = self._rows[idx]
        if lbl.text != text:
            lbl.text = text
        if lbl.color != color:
            lbl.color = color

    # ---------- Screen ----------
    def render(self, session):
        self._set_row(0, fit_summary(session.config, self.max_w, self.measure))

        if session.has_result and session.outcome is not None:
            out = session.outcome
            color = result_color(session.crit, out.wild_used)
            total = format_total(out.total)
            if session.crit:
                total += " CRIT FAIL"
            self._set_row(1, total, color)
            lines = wrap_lines(format_details(out), self.max_w, self.measure, cfg.DETAIL_LINES)
            lines += [""] * (cfg.DETAIL_LINES - len(lines))
            self._set_row(2, lines[0])
            self._set_row(3, lines[1])
            prev = session.history.older_than_most_recent()
        else:
            self._set_row(1, "Press ROLL")
            self._set_row(2, "")
            self._set_row(3, "")
            prev = list(session.history)
        self._set_row(4, fit_history(prev, self.max_w, self.measure))

    # ---------- LEDs ----------
    def _key_colors(self, session, held):
        c = session.config
        cols = [cfg.OFF] * _N_KEYS
        for k, size in cfg.DIE_KEYS.items():
            cols[k] = cfg.LED_DIE_SET if c.counts[size] else cfg.LED_DIE_IDLE
        cols[cfg.K_WILD] = cfg.LED_WILD_ON if c.include_wild else cfg.LED_TOGGLE_OFF
        cols[cfg.K_EXPLODE] = cfg.LED_EXPLODE_ON if c.allow_explode else cfg.LED_TOGGLE_OFF
        cols[cfg.K_MOD_UP] = cfg.LED_MOD
        cols[cfg.K_MOD_DOWN] = cfg.LED_MOD
        cols[cfg.K_SHIFT] = cfg.LED_SHIFT_HELD if cfg.K_SHIFT in held else cfg.LED_SHIFT
        cols[cfg.K_RESET] = cfg.LED_RESET
        cols[cfg.K_ROLL] = cfg.LED_ROLL if session.total_dice() else cfg.OFF
        return cols

    def _write_pixels(self, colors):
        if not hasattr(self.mac, "pixels"):
            return
        px = self.mac.pixels
        changed = False
        for i in range(_N_KEYS):
            want = colors[i] & 0xFFFFFF
            if self._led_last[i] != want:
                px[i] = want
                self._led_last[i] = want
                changed = True
        if changed:
            try:
                px.show()
            except AttributeError:
                pass

    def update_leds(self, session, held=()):
        if self._crit_t0 is not None:
            return
        self._write_pixels(self._key_colors(session, held))

    def start_crit_pulse(self):
        self._crit_t0 = time.monotonic()

    def tick(self, session, held=(), now=None):
        """Advance the crit-fail pulse. Non-blocking; returns when done."""
        if self._crit_t0 is None:
            return
        now = time.monotonic() if now is None else now
        t = now - self._crit_t0
        if t >= cfg.CRIT_DURATION:
            self._crit_t0 = None
            self.update_leds(session, held)
            return
        phase = (t / cfg.CRIT_DURATION) * cfg.CRIT_CYCLES
        phase -= int(phase)
        y = 1.0 - 0.5 * (1.0 + math.cos(math.pi * phase))
        b = cfg.CRIT_FLOOR + (1.0 - cfg.CRIT_FLOOR) * y
        self._write_pixels([_scale_color(cfg.RED, b)] * _N_KEYS)

    def cleanup(self):
        self._crit_t0 = None
        self._write_pixels([cfg.OFF] * _N_KEYS)
        try:
            self.mac.pixels.auto_write = True
        except AttributeError:
            pass
