import readchar

from dirpick.keys import CTRL_C, CTRL_N, CTRL_P, CTRL_W, ESCAPE, decode, decode_keystroke
from dirpick.selector import (
    CLEAR_INPUT, CONFIRM, ERASE, MOVE_DOWN, MOVE_UP, QUIT, TOGGLE_HELP, PrintableChar,
)


def test_control_keys():
    assert decode(CTRL_C) == QUIT
    assert decode(ESCAPE) == QUIT
    assert decode(CTRL_W) == CLEAR_INPUT
    assert decode(CTRL_P) == MOVE_UP
    assert decode(CTRL_N) == MOVE_DOWN


def test_readchar_keys():
    assert decode(readchar.key.UP) == MOVE_UP
    assert decode(readchar.key.DOWN) == MOVE_DOWN
    assert decode(readchar.key.ENTER) == CONFIRM
    assert decode(readchar.key.BACKSPACE) == ERASE
    assert decode("\n") == CONFIRM


def test_question_mark_toggles_help():
    assert decode("?") == TOGGLE_HELP


def test_printable_characters():
    assert decode("a") == PrintableChar("a")
    assert decode("/") == PrintableChar("/")
    assert decode(" ") == PrintableChar(" ")


def test_unbound_keys():
    assert decode(readchar.key.LEFT) is None
    assert decode("\x01") is None
    assert decode("") is None
    assert decode("\x1b[15~") is None


def test_blessed_names_win_over_raw():
    assert decode("\x1b[A", "KEY_UP") == MOVE_UP
    assert decode("\r", "KEY_ENTER") == CONFIRM
    assert decode("\x7f", "KEY_BACKSPACE") == ERASE
    assert decode("\x1b", "KEY_ESCAPE") == QUIT
    assert decode("\x1b[D", "KEY_LEFT") is None


class Keystroke(str):
    """Minimal stand-in for blessed.keyboard.Keystroke."""

    def __new__(cls, ucs="", name=None):
        new = str.__new__(cls, ucs)
        new.name = name
        return new

    @property
    def is_sequence(self):
        return self.name is not None


def test_decode_keystroke():
    assert decode_keystroke(Keystroke("x")) == PrintableChar("x")
    assert decode_keystroke(Keystroke("\x1b[B", "KEY_DOWN")) == MOVE_DOWN
    assert decode_keystroke(Keystroke(CTRL_W)) == CLEAR_INPUT
    assert decode_keystroke(Keystroke("", None)) is None


def test_forward_delete_is_unbound():
    # only backspace erases
    assert decode("\x1b[3~", "KEY_DELETE") is None
