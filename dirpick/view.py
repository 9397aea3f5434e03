"""Pure rendering of a SelectorState into a list of frame lines.

No styling happens here; each Line only says whether it is the highlighted
row, a faint row, or carries the cursor glyph. See dirpick.style.
"""
from dataclasses import dataclass
from typing import List, Optional

from dirpick.selector import SelectorState

PROMPT = "Which project do you want to open?"
CURSOR = "█"

HIGHLIGHT = "highlight"
FAINT = "faint"

HELP_FULL = [
    "?         hide key bindings",
    "ctrl+n/↓  move selection down",
    "ctrl+p/↑  move selection up",
    "ctrl+w    clear search string",
    "ctrl+c    quit",
]

HELP_SHORT = [
    "?         show key bindings",
    "ctrl+c    quit",
]


@dataclass(frozen=True)
class Line:
    text: str
    mark: Optional[str] = None
    cursor: bool = False  # last glyph of `text` is the cursor


def render(state: SelectorState) -> List[Line]:
    lines = [Line(PROMPT)]
    if state.done:
        lines.append(Line("> " + state.input_buffer))
    else:
        lines.append(Line("> " + state.input_buffer + CURSOR, cursor=True))
    lines.append(Line(""))

    # widths come from the whole list so alignment does not depend on the window
    name_w = max((len(c.name) for c in state.candidates), default=0)
    loc_w = max((len(c.location) for c in state.candidates), default=0)

    for i, c in enumerate(state.candidates[:max(state.window, 0)]):
        text = "  " + c.name.ljust(name_w) + "  " + c.location.ljust(loc_w + 1) + " "
        lines.append(Line(text, mark=HIGHLIGHT if i == state.highlighted else FAINT))

    lines.append(Line(""))
    help_lines = HELP_FULL if state.help_visible else HELP_SHORT
    lines.extend(Line(t) for t in help_lines)
    return lines


def candidate_rows(frame: List[Line]) -> List[Line]:
    return [l for l in frame if l.mark in (HIGHLIGHT, FAINT)]


def frame_text(frame: List[Line]) -> str:
    return "\n".join(l.text for l in frame)
