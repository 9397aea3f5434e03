"""Decode raw key input into selector events.

This is the only place that knows about key encodings; the transition
function sees Event objects only. Both drivers go through `decode`: the live
driver passes readchar strings, the terminal driver passes blessed
keystrokes (raw string plus key name).
"""
from typing import Optional

import readchar

from dirpick.selector import (
    CLEAR_INPUT, CONFIRM, ERASE, MOVE_DOWN, MOVE_UP, QUIT, TOGGLE_HELP,
    PrintableChar,
)

CTRL_C = '\x03'
CTRL_N = '\x0e'
CTRL_P = '\x10'
CTRL_W = '\x17'
ESCAPE = '\x1b'

RAW_KEYS = {
    CTRL_C: QUIT,
    ESCAPE: QUIT,
    CTRL_W: CLEAR_INPUT,
    CTRL_P: MOVE_UP,
    CTRL_N: MOVE_DOWN,
    readchar.key.UP: MOVE_UP,
    readchar.key.DOWN: MOVE_DOWN,
    readchar.key.ENTER: CONFIRM,
    '\r': CONFIRM,
    '\n': CONFIRM,
    readchar.key.BACKSPACE: ERASE,
    '\x7f': ERASE,
    '\x08': ERASE,
    '?': TOGGLE_HELP,
}

# blessed Keystroke.name values
NAMED_KEYS = {
    'KEY_UP': MOVE_UP,
    'KEY_DOWN': MOVE_DOWN,
    'KEY_ENTER': CONFIRM,
    'KEY_BACKSPACE': ERASE,
    'KEY_ESCAPE': QUIT,
}


def decode(raw: str, name: Optional[str] = None):
    """Event for one key press, or None when the key has no binding."""
    if name and name in NAMED_KEYS:
        return NAMED_KEYS[name]
    if raw in RAW_KEYS:
        return RAW_KEYS[raw]
    if name:  # some other named sequence (F-keys, arrows left/right, ...)
        return None
    if len(raw) == 1 and raw.isprintable():
        return PrintableChar(raw)
    return None


def decode_keystroke(ks):
    """Decode a blessed Keystroke."""
    return decode(str(ks), ks.name if ks.is_sequence else None)
