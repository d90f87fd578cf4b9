# wild_dice_text.py — line splitting and the strings the screen shows
#
# The OLED is 128 px wide, so roll details get wrapped with split_line().
# Widths come from a measure(text) -> pixels callback; glyph_width_measure()
# builds one from a bitmap font (terminalio.FONT on the MacroPad).

from wild_dice_config import DIE_SIZES, WHITE, RED, AMBER

NO_SPLIT = -1
CANNOT_SPLIT = -2

BREAK_CHARS = ",+ "

# ---------- Splitting ----------
def split_line(s, max_width, measure):
    """
    Index of the rightmost ',', ' ' or '+' whose prefix (inclusive) fits in
    max_width pixels. NO_SPLIT if the whole string fits, CANNOT_SPLIT if no
    break point does.
    """
    if measure(s) <= max_width:
        return NO_SPLIT
    i = len(s) - 1
    while i >= 0:
        if s[i] in BREAK_CHARS and measure(s[:i + 1]) <= max_width:
            return i
        i -= 1
    return CANNOT_SPLIT

def split_at(s, i):
    head = s[:i + 1]
    rest = s[i + 1:]
    if rest.startswith(" "):
        rest = rest[1:]
    return head, rest

def wrap_lines(s, max_width, measure, max_lines=None):
    lines = []
    while s:
        if max_lines is not None and len(lines) == max_lines - 1:
            lines.append(s)
            break
        i = split_line(s, max_width, measure)
        if i < 0:
            # NO_SPLIT fits; CANNOT_SPLIT overflows as one line
            lines.append(s)
            break
        head, s = split_at(s, i)
        # A break on the space after a comma leaves it dangling
        lines.append(head.rstrip(" "))
    return lines

ELLIPSIS = ".."

def fit_line(s, max_width, measure, tail=""):
    """
    One row: s cut at its last fitting break point (marked with ELLIPSIS),
    followed by tail, which is always kept whole.
    """
    if measure(s + tail) <= max_width:
        return s + tail
    room = max_width - measure(tail) - measure(ELLIPSIS)
    i = split_line(s, room, measure)
    if i < 0:
        # Nothing fits in front of the tail; overflow rather than drop it
        return s + tail
    return s[:i + 1].rstrip(" +,") + ELLIPSIS + tail

def fit_history(values, max_width, measure):
    """History row with the oldest entries dropped until it fits."""
    values = list(values)
    while values:
        s = format_history(values)
        if measure(s) <= max_width:
            return s
        values.pop()
    return ""

# ---------- Measuring ----------
def fixed_width_measure(px_per_char):
    def measure(text):
        return len(text) * px_per_char
    return measure

def glyph_width_measure(font):
    try:
        fallback = font.get_bounding_box()[0] or 6
    except Exception:
        fallback = 6
    cache = {}

    def advance(ch):
        w = cache.get(ch)
        if w is None:
            glyph = font.get_glyph(ord(ch))
            w = glyph.shift_x if glyph is not None else fallback
            cache[ch] = w
        return w

    def measure(text):
        return sum(advance(ch) for ch in text)
    return measure

# ---------- Formatting ----------
def format_chain(chain):
    return "+".join(str(v) for v in chain)

def format_details(outcome):
    s = ", ".join(format_chain(chain) for _, chain in outcome.groups)
    if outcome.wild_chain is not None:
        s += "  W:" + format_chain(outcome.wild_chain)
        if not outcome.wild_used:
            s += "x"
    return s

def format_modifier(mod):
    if mod > 0:
        return "+{}".format(mod)
    if mod < 0:
        return str(mod)
    return ""

def summary_parts(config):
    """(dice, tail): the dice terms, then modifier and wild/explode flags."""
    terms = ["{}d{}".format(config.counts[size], size)
             for size in DIE_SIZES if config.counts[size]]
    mod = format_modifier(config.plus_or_minus)
    if terms:
        dice, tail = "+".join(terms), mod
    else:
        dice, tail = "No dice", (" " + mod if mod else "")
    if config.include_wild:
        tail += " W"
    if config.allow_explode:
        tail += " X"
    return dice, tail

def format_summary(config):
    dice, tail = summary_parts(config)
    return dice + tail

def fit_summary(config, max_width, measure):
    dice, tail = summary_parts(config)
    return fit_line(dice, max_width, measure, tail)

def format_total(total):
    return "Total: {}".format(total)

def format_history(values):
    if not values:
        return ""
    return "Prev: " + ", ".join(str(v) for v in values)

def result_color(crit, wild_used):
    if crit:
        return RED
    if wild_used:
        return AMBER
    return WHITE
