"""Pick a directory alias from a short list in the terminal.

The interactive core is `dirpick.selector` (state and transitions) and
`dirpick.view` (rendering); everything else drives or decorates it.
"""
from dirpick.selector import (
    Candidate, SelectorState, new_state, transition,
    Quit, Confirm, ClearInput, MoveUp, MoveDown, Erase, ToggleHelp, PrintableChar,
)
from dirpick.view import Line, render

__version__ = "0.1.0"
