# -----------------------------------------------------------------------------
# Wild Dice Configuration Module
# -----------------------------------------------------------------------------
# Shared tunables for the Wild Dice roller. Imported by wild_dice.py,
# wild_dice_engine.py, wild_dice_session.py, wild_dice_text.py and
# wild_dice_ui.py so every module reads the same key map, bounds and colours.
#
# Typical Contents:
#   DEBUG
#     Boolean flag that controls whether debug_print() emits diagnostics.
#
#   debug_print(*args, **kwargs)
#     print() wrapper that only outputs text if DEBUG is True.
#
#   Key map, dice bounds, history size, screen geometry, LED colours.
#
# Usage:
#       import wild_dice_config as cfg
#       cfg.debug_print("[roll]", total)
#
# Nothing here is persisted; every value resets on power-up.
# -----------------------------------------------------------------------------

DEBUG = False

def debug_print(*args, **kwargs):
    """Print only if DEBUG is enabled."""
    if DEBUG:
        print(*args, **kwargs)

# ---------- Dice ----------
DIE_SIZES = (4, 6, 8, 10, 12)
WILD_SIZE = 6

MIN_COUNT, MAX_COUNT = 0, 99
MIN_MOD, MAX_MOD = -99, 99

# One more than the "Prev:" strip shows; slot 0 is the current result
HISTORY_SIZE = 5

# ---------- Keys (MacroPad 3x4 grid) ----------
#   0  1  2      d4  d6  d8
#   3  4  5      d10 d12 WILD
#   6  7  8      EXPL MOD+ MOD-
#   9 10 11      SHIFT RESET ROLL
K_D4, K_D6, K_D8, K_D10, K_D12 = 0, 1, 2, 3, 4
K_WILD, K_EXPLODE = 5, 6
K_MOD_UP, K_MOD_DOWN = 7, 8
K_SHIFT, K_RESET, K_ROLL = 9, 10, 11

DIE_KEYS = {
    K_D4: 4,
    K_D6: 6,
    K_D8: 8,
    K_D10: 10,
    K_D12: 12,
}

# ---------- Screen ----------
SCREEN_W, SCREEN_H = 128, 64
TEXT_MARGIN = 2
LINE_H = 12
ROW_SUMMARY, ROW_TOTAL, ROW_DETAIL1, ROW_DETAIL2, ROW_HISTORY = 0, 12, 24, 36, 50
DETAIL_LINES = 2

# ---------- Colours ----------
WHITE = 0xFFFFFF
RED = 0xFF0000
AMBER = 0xFFB000
OFF = 0x000000

LED_BRIGHTNESS = 0.30
LED_DIE_IDLE = 0x101030
LED_DIE_SET = 0x2060FF
LED_TOGGLE_OFF = 0x201000
LED_WILD_ON = 0xC09040
LED_EXPLODE_ON = 0xFF4000
LED_MOD = 0x006020
LED_SHIFT = 0x404040
LED_SHIFT_HELD = 0xFFFFFF
LED_RESET = 0x400000
LED_ROLL = 0x00C000

# Crit-fail pulse
CRIT_DURATION = 1.2
CRIT_CYCLES = 2.0
CRIT_FLOOR = 0.18
