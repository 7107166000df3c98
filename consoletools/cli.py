"""Command-line front door for consoletools.

Parses CLI options, resolves the starting directory, and runs the
interactive directory browser. The selected path is printed, or with
``--show`` the selected file's contents are printed highlighted.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import (
    load_allow_directory_selection,
    load_last_directory,
    load_theme_name,
    save_allow_directory_selection,
    save_last_directory,
    save_theme_name,
)
from .console import TokenReader
from .files import FileOpenError, read_file, safe_is_dir
from .highlight import DEFAULT_STYLE, colorize_source, decode_text, sanitize_terminal_text
from .navigator import DirectoryNavigator
from .render import Renderer
from .theme import available_theme_names, normalize_theme_name, resolve_theme

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _resolve_start(path_arg: str | None, default_path: Path | None) -> Path:
    if path_arg is not None:
        return Path(path_arg)
    if default_path is not None:
        return default_path
    return load_last_directory() or Path.cwd()


def show_file(path: Path, style: str, no_color: bool) -> str:
    """Return the contents of ``path`` ready for printing."""
    handle = read_file(path)
    text = decode_text(handle.contents)
    if no_color:
        return sanitize_terminal_text(text)
    return colorize_source(text, path, style)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and browse for a file or directory.

    ``default_path`` is primarily for tests; when omitted the remembered
    directory from config (or the current working directory) is used.
    Exits with status 1 when browsing is cancelled.
    """
    parser = argparse.ArgumentParser(
        description="Browse directories with a numbered terminal menu and print the selected path."
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to start in.")
    parser.add_argument(
        "--select-dir",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Offer 'd' to select the current directory (remembered in config).",
    )
    parser.add_argument("--show", action="store_true", help="Print the selected file's contents instead of its path.")
    parser.add_argument("--style", default=DEFAULT_STYLE, help="Pygments style name used by --show.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Menu theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--verbose", action="store_true", help="Log navigation and file operations to stderr.")
    args = parser.parse_args()

    _configure_logging(args.verbose)

    start = _resolve_start(args.path, default_path)
    if not safe_is_dir(start):
        raise SystemExit(f"Not a directory: {start}")

    if args.theme is not None:
        save_theme_name(normalize_theme_name(args.theme))
        theme_name: str | None = args.theme
    else:
        theme_name = load_theme_name()

    if args.select_dir is not None:
        save_allow_directory_selection(args.select_dir)
        allow_directory_selection = args.select_dir
    else:
        allow_directory_selection = load_allow_directory_selection()

    renderer = Renderer(sys.stdout, no_color=args.no_color)
    navigator = DirectoryNavigator(
        start,
        renderer=renderer,
        reader=TokenReader(sys.stdin),
        theme=resolve_theme(theme_name, no_color=args.no_color),
        allow_directory_selection=allow_directory_selection,
    )
    selected = navigator.browse()
    renderer.render("")
    if selected is None:
        logger.debug("nothing selected")
        raise SystemExit(1)

    save_last_directory(selected if selected.is_dir() else selected.parent)

    if args.show and not selected.is_dir():
        try:
            sys.stdout.write(show_file(selected, args.style, args.no_color))
        except FileOpenError as exc:
            raise SystemExit(str(exc)) from exc
        return
    sys.stdout.write(f"{selected}\n")


if __name__ == "__main__":
    main()
