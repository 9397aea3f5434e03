"""rich driver: frames shown through a Live display, keys read with readchar."""
import logging

import readchar
from rich.console import Console
from rich.live import Live
from rich.text import Text

from dirpick.keys import decode
from dirpick.selector import QUIT, SelectorState
from dirpick.session import run_session
from dirpick.style import RichStyle, decorate

logger = logging.getLogger(__name__)


def read_event(readkey=readchar.readkey):
    try:
        key = readkey()
    except KeyboardInterrupt:
        return QUIT
    event = decode(key)
    logger.debug("key %r -> %r", key, event)
    return event


def run(state: SelectorState, console=None, style=None, readkey=readchar.readkey) -> SelectorState:
    console = console or Console(stderr=True, highlight=False)
    style = style or RichStyle()

    with Live(Text(""), console=console, auto_refresh=False) as live:
        def show(frame):
            live.update(decorate(frame, style), refresh=True)

        return run_session(state, lambda: read_event(readkey), show)
