"""blessed driver: draws frames inline and reads keys with Terminal.inkey()."""
import os
import sys
import logging

os.environ.setdefault('ESCDELAY', '25')  # reduce escape key delay (ms)

from blessed import Terminal

from dirpick.keys import decode_keystroke
from dirpick.selector import QUIT, SelectorState
from dirpick.session import run_session
from dirpick.style import TerminalStyle, decorate

logger = logging.getLogger(__name__)


class InlineScreen:
    """Redraws a frame in place, below whatever was on screen before."""

    def __init__(self, term, style, out=None):
        self.term = term
        self.style = style
        self.out = out
        self.height = 0

    def show(self, frame):
        rows = decorate(frame, self.style)
        t = self.term
        s = ""
        if self.height:
            s += t.move_up(self.height) + t.move_x(0) + t.clear_eos
        s += "\n".join(rows) + "\n"
        self.height = len(rows)
        print(s, end='', flush=True, file=self.out)


def run(state: SelectorState, term=None, style=None) -> SelectorState:
    # stdout is reserved for `--print`; blessed still reads keys from stdin
    # when its stream is sys.__stderr__
    term = term or Terminal(stream=sys.__stderr__)
    screen = InlineScreen(term, style or TerminalStyle(term), out=term.stream)

    def next_event():
        try:
            ks = term.inkey()
        except KeyboardInterrupt:
            return QUIT
        if not ks and ks.name is None:
            # a blocking inkey() only comes back empty without a keyboard
            raise EOFError("no keyboard input available")
        event = decode_keystroke(ks)
        logger.debug("key %r (%s) -> %r", str(ks), ks.name, event)
        return event

    with term.cbreak(), term.hidden_cursor():
        return run_session(state, next_event, screen.show)
