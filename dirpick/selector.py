"""Selector state and the transition function.

The state is a frozen dataclass; `transition` never mutates it, it returns a
new one (or the same object when the event changes nothing).
"""
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple, Union
import logging

logger = logging.getLogger(__name__)

DEFAULT_WINDOW = 10


@dataclass(frozen=True)
class Candidate:
    name: str
    location: str


# --- events ---

@dataclass(frozen=True)
class Quit:
    pass

@dataclass(frozen=True)
class Confirm:
    pass

@dataclass(frozen=True)
class ClearInput:
    pass

@dataclass(frozen=True)
class MoveUp:
    pass

@dataclass(frozen=True)
class MoveDown:
    pass

@dataclass(frozen=True)
class Erase:
    pass

@dataclass(frozen=True)
class ToggleHelp:
    pass

@dataclass(frozen=True)
class PrintableChar:
    char: str


Event = Union[Quit, Confirm, ClearInput, MoveUp, MoveDown, Erase, ToggleHelp, PrintableChar]

QUIT = Quit()
CONFIRM = Confirm()
CLEAR_INPUT = ClearInput()
MOVE_UP = MoveUp()
MOVE_DOWN = MoveDown()
ERASE = Erase()
TOGGLE_HELP = ToggleHelp()


@dataclass(frozen=True)
class SelectorState:
    candidates: Tuple[Candidate, ...] = ()
    window: int = DEFAULT_WINDOW
    input_buffer: str = ""
    highlighted: int = 0
    help_visible: bool = False
    done: bool = False
    selection: str = ""
    cancelled: bool = False  # session ended with Quit rather than Confirm


def _as_candidate(item) -> Candidate:
    if isinstance(item, Candidate):
        return item
    name, location = item
    return Candidate(str(name), str(location))


def new_state(candidates: Optional[Iterable] = None, window: int = DEFAULT_WINDOW) -> SelectorState:
    """Zero state for one session. `candidates` may hold Candidates or (name, location) pairs."""
    cands = tuple(_as_candidate(c) for c in (candidates or ()))
    return SelectorState(candidates=cands, window=window)


def last_index(state: SelectorState) -> int:
    """Highest index navigation may reach; -1 when there is nothing to show."""
    return min(state.window, len(state.candidates)) - 1


def transition(state: SelectorState, event) -> Tuple[SelectorState, bool]:
    """Apply one event. Returns (new_state, terminate).

    Unknown events (including None) leave the state untouched.
    """
    if state.done:
        return state, True

    if isinstance(event, Quit):
        logger.debug("quit with selection %r", state.selection)
        return replace(state, done=True, cancelled=True), True

    if isinstance(event, Confirm):
        logger.debug("confirm with selection %r", state.selection)
        return replace(state, done=True), True

    if isinstance(event, ClearInput):
        return replace(state, input_buffer=""), False

    if isinstance(event, MoveUp):
        if state.highlighted > 0:
            return replace(state, highlighted=state.highlighted - 1), False
        return state, False

    if isinstance(event, MoveDown):
        if state.highlighted < last_index(state):
            return replace(state, highlighted=state.highlighted + 1), False
        return state, False

    if isinstance(event, Erase):
        if state.input_buffer:
            return replace(state, input_buffer=state.input_buffer[:-1]), False
        return state, False

    if isinstance(event, ToggleHelp):
        return replace(state, help_visible=not state.help_visible), False

    if isinstance(event, PrintableChar) and len(event.char) == 1:
        buf = state.input_buffer + event.char
        return replace(state, input_buffer=buf, selection=buf), False

    return state, False
