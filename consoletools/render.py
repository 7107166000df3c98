"""Console output sink used by the interactive helpers.

``Renderer`` is the only place escape codes reach the terminal. Callers pass
semantic ``Color``/``Modifier`` values (or a theme ``TextStyle``) and never
write raw sequences themselves.
"""

from __future__ import annotations

import sys
from typing import TextIO

from .ansi import CLEAR_SCREEN, Color, Modifier, style_text
from .theme import TextStyle


class Renderer:
    def __init__(self, stream: TextIO | None = None, *, no_color: bool = False) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.no_color = no_color

    def render(
        self,
        text: str,
        color: Color | None = None,
        modifier: Modifier | None = None,
        end: str = "\n",
    ) -> None:
        """Write ``text`` followed by ``end``, styled unless colors are off."""
        if self.no_color:
            color = None
            modifier = None
        self.stream.write(style_text(text, color, modifier, end))
        self.stream.flush()

    def render_styled(self, text: str, style: TextStyle, end: str = "\n") -> None:
        self.render(text, style.color, style.modifier, end)

    def clear(self) -> None:
        """Clear the screen and home the cursor; a no-op without colors."""
        if self.no_color:
            return
        self.stream.write(CLEAR_SCREEN)
        self.stream.flush()
