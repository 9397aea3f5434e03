"""The render / wait / transition loop shared by the drivers."""
from typing import Callable, Iterable, List
import logging

from dirpick.selector import QUIT, SelectorState, transition
from dirpick.view import Line, render

logger = logging.getLogger(__name__)


def run_session(state: SelectorState,
                next_event: Callable[[], object],
                show: Callable[[List[Line]], None]) -> SelectorState:
    '''
    Drives one session until a terminating event and returns the final state.

    `next_event` blocks until the next event is available (None means a key
    with no binding). If it raises StopIteration or EOFError the input is
    gone and the session ends as if Quit had been pressed.
    '''
    while True:
        show(render(state))
        try:
            event = next_event()
        except (StopIteration, EOFError):
            logger.debug("input exhausted, quitting")
            event = QUIT
        state, stop = transition(state, event)
        if stop:
            show(render(state))  # final frame, no cursor
            return state


def scripted(events: Iterable) -> Callable[[], object]:
    it = iter(events)
    return lambda: next(it)
