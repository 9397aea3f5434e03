"""Styling for rendered frames.

A style decorates single lines (highlighted, faint, cursor) and wraps the
whole frame in a rounded border with one column of padding. Styles are plain
objects handed to the drivers, nothing here is global.
"""
from typing import Any, Callable, List, Protocol

from rich import box
from rich.panel import Panel
from rich.text import Text

from dirpick.view import FAINT, HIGHLIGHT, Line


class Style(Protocol):
    def line(self, line: Line) -> Any: ...
    def window(self, lines: list) -> Any: ...


def rounded_box(lines: List[str], length: Callable[[str], int] = len) -> List[str]:
    """Rounded border, one space of padding left and right."""
    w = max((length(l) for l in lines), default=0)
    out = ["╭" + "─" * (w + 2) + "╮"]
    for l in lines:
        out.append("│ " + l + " " * (w - length(l)) + " │")
    out.append("╰" + "─" * (w + 2) + "╯")
    return out


class PlainStyle:
    """No escape sequences at all. Used for dumb terminals and in tests."""

    def line(self, line: Line) -> str:
        return line.text

    def window(self, lines: List[str]) -> List[str]:
        return rounded_box(lines)


class TerminalStyle:
    """blessed formatting; colors degrade to nothing on terminals without them."""

    def __init__(self, term):
        self.term = term

    def line(self, line: Line) -> str:
        t = self.term
        if line.mark == HIGHLIGHT:
            return t.bright_white_on_purple(line.text)
        if line.mark == FAINT:
            return t.dim(line.text)
        if line.cursor and line.text:
            return line.text[:-1] + t.blink(line.text[-1])
        return line.text

    def window(self, lines: List[str]) -> List[str]:
        return rounded_box(lines, length=self.term.length)


class RichStyle:
    def line(self, line: Line) -> Text:
        if line.mark == HIGHLIGHT:
            return Text(line.text, style="bright_white on purple")
        if line.mark == FAINT:
            return Text(line.text, style="dim")
        if line.cursor and line.text:
            txt = Text(line.text[:-1])
            txt.append(line.text[-1], style="blink")
            return txt
        return Text(line.text)

    def window(self, lines: List[Text]) -> Panel:
        return Panel(Text("\n").join(lines), box=box.ROUNDED, padding=(0, 1), expand=False)


def decorate(frame: List[Line], style) -> Any:
    return style.window([style.line(l) for l in frame])
