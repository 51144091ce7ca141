# File: src/mstair/vardump/dumper/highlighter.py
"""
Syntax highlighting collaborator for structural dumps.

The engine only knows the `Highlighter` protocol. `RichHighlighter` is the
default implementation: it renders the text through ``rich.syntax.Syntax``
(a Pygments lexer) into ANSI markup.
"""

from __future__ import annotations

from typing import Final, Protocol, runtime_checkable

from rich.console import Console
from rich.syntax import Syntax


__all__ = [
    "HIGHLIGHT_MARKER",
    "Highlighter",
    "RichHighlighter",
    "highlight_dump",
]


HIGHLIGHT_MARKER: Final[str] = "# vardump: python\n"
"""Synthetic language-marker line put in front of the text handed to a Highlighter."""


@runtime_checkable
class Highlighter(Protocol):
    """Turns plain text (starting with HIGHLIGHT_MARKER) into colorized markup."""

    def colorize(self, text: str) -> str: ...


class RichHighlighter:
    """Highlighter that emits ANSI escape sequences using rich and Pygments."""

    lexer: str
    theme: str
    color_system: str

    def __init__(
        self,
        lexer: str = "python",
        theme: str = "monokai",
        color_system: str = "truecolor",
    ) -> None:
        self.lexer = lexer
        self.theme = theme
        self.color_system = color_system

    def __repr__(self) -> str:
        return f"RichHighlighter(lexer={self.lexer!r}, theme={self.theme!r})"

    def colorize(self, text: str) -> str:
        # Wide enough that no line is cropped
        width = max([80, *(len(line) + 8 for line in text.splitlines())])
        console = Console(
            width=width,
            force_terminal=True,
            color_system=self.color_system,  # type: ignore[arg-type]
            soft_wrap=True,
            highlight=False,
        )
        syntax = Syntax(
            text,
            self.lexer,
            theme=self.theme,
            background_color="default",
            word_wrap=False,
        )
        with console.capture() as capture:
            console.print(syntax)
        return capture.get()


def highlight_dump(plain: str, highlighter: Highlighter) -> str:
    """
    Colorize a finished dump: add the marker line, colorize, then drop the first line.

    Trailing newlines added by the highlighter beyond those in ``plain`` are removed.
    """
    colored = highlighter.colorize(HIGHLIGHT_MARKER + plain)
    _marker, sep, rest = colored.partition("\n")
    if not sep:
        return ""
    trailing = len(plain) - len(plain.rstrip("\n"))
    return rest.rstrip("\n") + "\n" * trailing


# End of file: src/mstair/vardump/dumper/highlighter.py
