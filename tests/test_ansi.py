"""Styling primitives, the renderer sink, and theme selection."""

from __future__ import annotations

import io
import unittest

from consoletools.ansi import CLEAR_SCREEN, RESET, Color, Modifier, strip_ansi, style_text
from consoletools.render import Renderer
from consoletools.theme import DEFAULT_THEME, OCEAN_THEME, PLAIN_THEME, TextStyle, normalize_theme_name, resolve_theme


class StyleTextTests(unittest.TestCase):
    def test_modifier_precedes_color_and_reset_follows_terminator(self) -> None:
        styled = style_text("hi", Color.RED, Modifier.BOLD, end="\n")

        self.assertEqual(styled, "\x1b[1m\x1b[31mhi\n\x1b[0m")
        self.assertEqual(strip_ansi(styled), "hi\n")

    def test_unstyled_text_has_no_escape_codes(self) -> None:
        self.assertEqual(style_text("plain", end=" "), "plain ")

    def test_background_colors_use_forty_range(self) -> None:
        self.assertEqual(Color.BACK_BLUE.value, "\x1b[44m")


class RendererTests(unittest.TestCase):
    def test_render_writes_styled_text(self) -> None:
        output = io.StringIO()

        Renderer(output).render("x", Color.GREEN, end=" ")

        self.assertEqual(output.getvalue(), f"{Color.GREEN.value}x {RESET}")

    def test_no_color_renderer_drops_styles_and_clear(self) -> None:
        output = io.StringIO()
        renderer = Renderer(output, no_color=True)

        renderer.clear()
        renderer.render_styled("x", TextStyle(Color.RED, Modifier.UNDERLINE))

        self.assertEqual(output.getvalue(), "x\n")

    def test_clear_writes_clear_screen_sequence(self) -> None:
        output = io.StringIO()

        Renderer(output).clear()

        self.assertEqual(output.getvalue(), CLEAR_SCREEN)


class ThemeTests(unittest.TestCase):
    def test_resolve_theme_by_name_and_color_mode(self) -> None:
        self.assertIs(resolve_theme("ocean"), OCEAN_THEME)
        self.assertIs(resolve_theme(" OCEAN "), OCEAN_THEME)
        self.assertIs(resolve_theme("missing"), DEFAULT_THEME)
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)

    def test_normalize_theme_name_falls_back_to_default(self) -> None:
        self.assertEqual(normalize_theme_name(None), "default")
        self.assertEqual(normalize_theme_name("plain"), "default")


if __name__ == "__main__":
    unittest.main()
