"""Line-oriented console input.

Reads whitespace-delimited tokens from a text stream, one per call, and
provides a guarded integer reader that retries until the user types a
valid number.
"""

from __future__ import annotations

import sys
from collections import deque
from typing import TextIO

from .ansi import Color, Modifier
from .render import Renderer


class EndOfInput(EOFError):
    """Raised when the input stream has no more tokens."""


class TokenReader:
    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self._pending: deque[str] = deque()

    def read_token(self) -> str:
        """Return the next token, reading further lines as needed."""
        while not self._pending:
            line = self.stream.readline()
            if not line:
                raise EndOfInput("input stream exhausted")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def discard_line(self) -> None:
        """Drop tokens left over from the line that was last read."""
        self._pending.clear()


def read_int(reader: TokenReader, renderer: Renderer) -> int:
    """Read tokens until one parses as an integer.

    Each rejected token discards the rest of its line and prints an error
    plus a retry prompt. ``EndOfInput`` propagates when input runs out.
    """
    while True:
        token = reader.read_token()
        try:
            return int(token)
        except ValueError:
            renderer.render("\nERROR: Invalid input!\n", Color.RED, Modifier.BOLD)
            renderer.render("Try again:", Color.GREEN, end=" ")
            reader.discard_line()
