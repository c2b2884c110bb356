"""Line-oriented terminal I/O."""

import sys
from typing import Optional, TextIO

from rich.console import Console

from simplecli.utils.exceptions import InputClosed

DIAGNOSTIC_STYLE = "yellow"


class Terminal:
    """Reads lines from an input stream and prints lines to an output stream.

    Prompts, items and headers are written to the console's file as is, so
    tabs and control characters survive. Diagnostics go through Rich for
    styling, with markup, emoji codes and highlighting turned off.

    Args:
        stdin: Input stream, defaults to sys.stdin at read time
        stdout: Output stream, defaults to sys.stdout at write time
        color: Style diagnostics when the output is a terminal
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        color: bool = True,
    ):
        self._stdin = stdin
        self.console = Console(
            file=stdout,
            color_system="auto" if color else None,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    def read_line(self) -> str:
        """Read one line with its terminator removed.

        Raises:
            InputClosed: The stream has no more lines
        """
        line = self.stdin.readline()
        if not line:
            raise InputClosed()
        return line.rstrip("\r\n")

    def write(self, text: str = "") -> None:
        """Write text unchanged, followed by a newline."""
        out = self.console.file
        out.write(text + "\n")
        out.flush()

    def write_lines(self, lines) -> None:
        for line in lines:
            self.write(line)

    def error(self, text: str) -> None:
        """Print a diagnostic for rejected input."""
        self.console.print(text, style=DIAGNOSTIC_STYLE)
