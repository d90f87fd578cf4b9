# wild_dice_engine.py — exploding dice, wild die, roll history
#
# Pure logic: no displayio, no hardware. The random source is passed in as
# any object with randint(lo, hi) (the random module or a random.Random).
#
# Roll rules:
#   • Explode: a die that lands on its max face is rolled again and added,
#     for as long as the max keeps coming up.
#   • Wild: one extra d6 (exploding too, if explode is on) replaces the
#     lowest die's contribution when it beats it. Ties go to the first die
#     rolled.

from collections import namedtuple

from wild_dice_config import (
    DIE_SIZES, WILD_SIZE, HISTORY_SIZE, debug_print,
)

RollOutcome = namedtuple(
    "RollOutcome",
    ("total", "groups", "rolled", "wild_chain", "wild_used", "replaced"),
)

class DiceConfig:
    """Counts per die size plus the wild/explode flags and a modifier."""

    def __init__(self):
        self.counts = {size: 0 for size in DIE_SIZES}
        self.include_wild = False
        self.allow_explode = True
        self.plus_or_minus = 0

    def total_dice(self):
        return sum(self.counts.values())

    def __repr__(self):
        return "DiceConfig(counts={}, wild={}, explode={}, mod={})".format(
            self.counts, self.include_wild, self.allow_explode, self.plus_or_minus
        )

def roll_one_die(size, explode, rng):
    """Roll one die, exploding on max. Returns (total, chain)."""
    if size < 1:
        raise ValueError("die size must be >= 1, got {}".format(size))
    total = 0
    chain = []
    while True:
        r = rng.randint(1, size)
        chain.append(r)
        total += r
        # A d1 always "explodes"; never chain on it
        if not explode or r < size or size == 1:
            break
    return total, chain

def roll_all(config, rng):
    if config.total_dice() == 0:
        raise ValueError("no dice configured")

    groups = []
    rolled = []
    for size in DIE_SIZES:
        for _ in range(config.counts.get(size, 0)):
            t, chain = roll_one_die(size, config.allow_explode, rng)
            groups.append((size, tuple(chain)))
            rolled.append(t)

    wild_chain = None
    wild_used = False
    replaced = None
    if config.include_wild and rolled:
        wild_total, chain = roll_one_die(WILD_SIZE, config.allow_explode, rng)
        wild_chain = tuple(chain)
        # min() keeps the first of equal keys: first minimum in roll order
        low = min(range(len(rolled)), key=rolled.__getitem__)
        if wild_total > rolled[low]:
            rolled[low] = wild_total
            wild_used = True
            replaced = low

    total = sum(rolled) + config.plus_or_minus
    debug_print("[roll]", groups, "wild:", wild_chain, "used:", wild_used, "=", total)
    return RollOutcome(total, tuple(groups), tuple(rolled), wild_chain, wild_used, replaced)

def is_critical_fail(outcome, config):
    """Single die plus wild, both bottomed out at 1."""
    if outcome is None or outcome.wild_chain is None:
        return False
    return (
        config.include_wild
        and len(outcome.rolled) == 1
        and outcome.total == 1 + config.plus_or_minus
    )

class RollHistory:
    """Fixed-size list of totals, most recent first."""

    def __init__(self, capacity=HISTORY_SIZE):
        if capacity < 1:
            raise ValueError("history capacity must be >= 1")
        self.capacity = capacity
        self._values = []

    def push_front(self, value):
        self._values.insert(0, value)
        del self._values[self.capacity:]

    def most_recent(self):
        return self._values[0] if self._values else None

    def older_than_most_recent(self):
        return self._values[1:]

    def clear(self):
        self._values = []

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        return iter(self._values)
