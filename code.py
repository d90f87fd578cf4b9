# code.py — Wild Dice boot + main loop
# CircuitPython 9.x / Adafruit MacroPad RP2040 (128×64 mono OLED)
#
# Purpose:
# - Sets up the MacroPad, seeds the random source once, and runs the
#   poll → update → render loop for the Wild Dice roller.
#
# Loop, once per tick:
# - Encoder rotate → modifier (forwarded as encoderChange)
# - Encoder press  → roll (forwarded as encoder_button)
# - Keypad events are drained into a held-key snapshot; the game gets
#   (changed, held) and fires each new press exactly once.
# - game.tick() drives the non-blocking LED animations.
#
# Notes:
# - All state is in RAM; nothing is saved between power cycles.
# - Per-tick errors are printed and the loop keeps going.

print("Wild Dice\nLoading\n")
import os
import time
import random
import gc
from adafruit_macropad import MacroPad

from wild_dice_input import KeyState
from wild_dice import wild_dice

TICK_S = 0.01

# ---- RAM debug helpers ----
def ram_snapshot():
    gc.collect()
    return (gc.mem_free(), gc.mem_alloc())

def ram_report(label=""):
    free, alloc = ram_snapshot()
    print(f"[RAM] {label} — free: {free} bytes, allocated: {alloc} bytes, total: {free+alloc} bytes")
    return (free, alloc)

def ram_report_delta(before, label=""):
    b_free, b_alloc = before
    a_free, a_alloc = ram_snapshot()
    print(f"[RAM Δ] {label} — Δfree: {a_free - b_free} bytes, Δalloc: {a_alloc - b_alloc} bytes")
    return (a_free, a_alloc)

ram_report("Boot start")

# ---------- Setup hardware ----------
macropad = MacroPad()
macropad.pixels.fill((0, 0, 0))

# One seed per boot from the hardware entropy source
random.seed(int.from_bytes(os.urandom(4), "big"))

keys = KeyState()

def flush_inputs():
    # Drain all pending key events and start from "nothing held"
    while macropad.keys.events.get():
        pass
    keys.clear()
    keys.poll()
    try:
        macropad.encoder_switch_debounced.update()
    except Exception:
        pass

# ---------- Game ----------
snap = ram_snapshot()
game = wild_dice(macropad)
ram_report_delta(snap, "Constructed wild_dice")
game.new_game()

try:
    macropad.display.auto_refresh = True
except Exception:
    pass
macropad.display.root_group = game.group
flush_inputs()

ram_report("After setup complete")

# ---------- Main loop ----------
last_encoder_position = macropad.encoder
last_encoder_switch = False

while True:
    pos = macropad.encoder
    if pos != last_encoder_position:
        try:
            game.encoderChange(pos, last_encoder_position)
        except Exception as e:
            print("encoderChange error:", e)
        last_encoder_position = pos

    macropad.encoder_switch_debounced.update()
    enc_pressed = macropad.encoder_switch_debounced.pressed
    if enc_pressed != last_encoder_switch:
        last_encoder_switch = enc_pressed
        try:
            game.encoder_button(enc_pressed)
        except Exception as e:
            print("encoder_button error:", e)

    keys.drain(macropad.keys.events)
    changed, held = keys.poll()
    try:
        game.update(changed, held)
    except Exception as e:
        print("update error:", e)

    try:
        game.tick()
    except Exception as e:
        print("tick error:", e)

    time.sleep(TICK_S)
