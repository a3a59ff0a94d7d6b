"""
Terminal Renderer
=================

Writes composed screens to a text stream using ANSI control sequences.

The animation loop only depends on the Renderer protocol, so tests can
substitute a recording renderer for the terminal.
"""

import logging
import sys
from typing import Iterable, Optional, Protocol, TextIO


logger = logging.getLogger(__name__)


CLEAR_SCREEN = "\033[H\033[2J"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"


class Renderer(Protocol):
    """
    Protocol for screen output.

    Implemented by:
        - TerminalRenderer: ANSI terminal on stdout
    """

    def clear(self) -> None:
        """Clear the screen and home the cursor."""
        ...

    def write_lines(self, lines: Iterable[str]) -> None:
        """Write lines top to bottom exactly as given."""
        ...


class TerminalRenderer:
    """
    ANSI terminal renderer.

    Example:
        renderer = TerminalRenderer()
        renderer.hide_cursor()
        try:
            renderer.clear()
            renderer.write_lines(["hello"])
        finally:
            renderer.show_cursor()
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream or sys.stdout

    def clear(self) -> None:
        self.stream.write(CLEAR_SCREEN)
        self.stream.flush()

    def write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.stream.write(line + "\n")
        self.stream.flush()

    def write_inline(self, text: str) -> None:
        """Overwrite the current line in place."""
        self.stream.write("\r" + text)
        self.stream.flush()

    def hide_cursor(self) -> None:
        self.stream.write(HIDE_CURSOR)
        self.stream.flush()

    def show_cursor(self) -> None:
        self.stream.write(SHOW_CURSOR)
        self.stream.flush()
