"""Interactive, menu-driven directory browser.

Each render cycle lists the cursor directory, numbers its entries from
``"1"`` in scan order, and resolves one typed token against that listing.
Listings are immutable values: ``handle_selection`` receives the listing the
user saw, so tokens from an older render are detected instead of being
resolved against a different directory.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .console import EndOfInput, TokenReader
from .files import FileOpenError, create_file, is_existing_file, safe_is_dir
from .highlight import sanitize_terminal_text
from .render import Renderer
from .theme import DEFAULT_THEME, MenuTheme

logger = logging.getLogger(__name__)

EXIT_TOKEN = "0"
BACK_TOKEN = "b"
CREATE_TOKEN = "c"
SELECT_DIR_TOKEN = "d"


@dataclass(frozen=True)
class ListingEntry:
    token: str
    is_dir: bool
    name: str


@dataclass(frozen=True)
class Listing:
    """Entries of one directory as shown during a single render cycle."""

    directory: Path
    entries: tuple[ListingEntry, ...] = ()
    error: OSError | None = None

    def lookup(self, token: str) -> ListingEntry | None:
        for entry in self.entries:
            if entry.token == token:
                return entry
        return None

    def token_table(self) -> dict[str, tuple[bool, str]]:
        return {entry.token: (entry.is_dir, entry.name) for entry in self.entries}


@dataclass(frozen=True)
class Browsing:
    path: Path
    message: str | None = None


@dataclass(frozen=True)
class Selected:
    path: Path


@dataclass(frozen=True)
class Cancelled:
    pass


NavigationOutcome = Browsing | Selected | Cancelled


def list_directory(directory: Path, show_hidden: bool = True) -> Listing:
    """Number the immediate children of ``directory`` in scan order.

    Scan failures produce an empty listing carrying the error.
    """
    entries: list[ListingEntry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                entries.append(ListingEntry(token=str(len(entries) + 1), is_dir=is_dir, name=name))
    except OSError as exc:
        logger.warning("cannot list %s: %s", directory, exc)
        return Listing(directory=directory, entries=(), error=exc)
    return Listing(directory=directory, entries=tuple(entries))


def _can_list(directory: Path) -> bool:
    try:
        with os.scandir(directory):
            return True
    except OSError:
        return False


def _is_valid_filename(name: str) -> bool:
    if not name or name in {".", ".."}:
        return False
    if os.sep in name:
        return False
    return not (os.altsep and os.altsep in name)


class DirectoryNavigator:
    """Menu-driven browser over the filesystem.

    ``current_path`` always names an existing directory. It moves only on
    ``"b"`` (parent) and when a listed directory is chosen; failed moves leave
    it untouched and report a message on the next render.
    """

    def __init__(
        self,
        start: Path | str | None = None,
        *,
        renderer: Renderer | None = None,
        reader: TokenReader | None = None,
        theme: MenuTheme = DEFAULT_THEME,
        allow_directory_selection: bool = False,
        show_hidden: bool = True,
    ) -> None:
        self._current_path = Path(start).resolve() if start is not None else Path.cwd()
        if not safe_is_dir(self._current_path):
            raise NotADirectoryError(str(self._current_path))
        self.renderer = renderer if renderer is not None else Renderer()
        self.reader = reader if reader is not None else TokenReader()
        self.theme = theme
        self.allow_directory_selection = allow_directory_selection
        self.show_hidden = show_hidden
        self.last_message: str | None = None

    @property
    def current_path(self) -> Path:
        return self._current_path

    def reserved_tokens(self) -> tuple[str, ...]:
        tokens = [BACK_TOKEN, CREATE_TOKEN]
        if self.allow_directory_selection:
            tokens.append(SELECT_DIR_TOKEN)
        tokens.append(EXIT_TOKEN)
        return tuple(tokens)

    def _recover_cursor(self) -> None:
        """Climb to the nearest existing ancestor if the cursor vanished."""
        path = self._current_path
        while not safe_is_dir(path) and path.parent != path:
            path = path.parent
        if path != self._current_path:
            logger.warning("directory %s disappeared, moving to %s", self._current_path, path)
            self._current_path = path

    def list_current(self) -> Listing:
        self._recover_cursor()
        return list_directory(self._current_path, show_hidden=self.show_hidden)

    def list_and_render(self) -> Listing:
        """List the cursor directory and draw the entries plus the menu."""
        listing = self.list_current()
        self.render_listing(listing)
        return listing

    def render_listing(self, listing: Listing) -> None:
        theme = self.theme
        out = self.renderer
        out.clear()
        out.render_styled("DIRS / FILES:\n", theme.heading)
        for entry in listing.entries:
            out.render_styled(f"{entry.token}.", theme.token, end=" ")
            if entry.is_dir:
                out.render_styled("(Dir)", theme.dir_label, end="\t")
            else:
                out.render_styled("(File)", theme.file_label, end="\t")
            out.render(sanitize_terminal_text(entry.name))
        if listing.error is not None:
            out.render_styled(f"Cannot list directory: {listing.error.strerror or listing.error}", theme.error)

        out.render_styled("\nCURRENT_DIR:", theme.current_dir_label, end=" ")
        out.render_styled(str(listing.directory), theme.current_dir, end="\n\n")
        out.render_styled(f"{BACK_TOKEN}. BACK", theme.menu_item)
        out.render_styled(f"{CREATE_TOKEN}. CREATE FILE", theme.menu_item)
        if self.allow_directory_selection:
            out.render_styled(f"{SELECT_DIR_TOKEN}. SELECT CURRENT DIRECTORY", theme.menu_item)
        out.render_styled(f"{EXIT_TOKEN}. EXIT\n", theme.menu_item)
        if self.last_message:
            out.render_styled(self.last_message, theme.error, end="\n\n")
            self.last_message = None
        out.render_styled("Select menu item:", theme.prompt, end=" ")

    def _stay(self, message: str | None = None) -> Browsing:
        if message is not None:
            logger.debug("recoverable: %s", message)
        self.last_message = message
        return Browsing(path=self._current_path, message=message)

    def handle_selection(self, listing: Listing, token: str) -> NavigationOutcome:
        """Resolve ``token`` against ``listing`` and apply the transition."""
        token = token.strip()
        if token == EXIT_TOKEN:
            logger.debug("browsing cancelled in %s", self._current_path)
            return Cancelled()
        if token == BACK_TOKEN:
            self._current_path = self._current_path.parent
            logger.debug("moved up to %s", self._current_path)
            return self._stay()
        if token == CREATE_TOKEN:
            return self._create_file()
        if token == SELECT_DIR_TOKEN and self.allow_directory_selection:
            logger.debug("selected directory %s", self._current_path)
            return Selected(path=self._current_path)

        entry = listing.lookup(token)
        if entry is None:
            return self._stay()
        if listing.directory != self._current_path:
            return self._stay("The listing is out of date")

        target = listing.directory / entry.name
        if entry.is_dir:
            if not safe_is_dir(target):
                return self._stay("The directory does not exist")
            if not _can_list(target):
                return self._stay(f"Cannot open directory: {entry.name}")
            self._current_path = target
            logger.debug("descended into %s", target)
            return self._stay()

        if not is_existing_file(target):
            return self._stay("The file does not exist")
        logger.debug("selected file %s", target)
        return Selected(path=target)

    def _create_file(self) -> Browsing:
        self.renderer.render_styled("\nEnter filename:", self.theme.prompt, end=" ")
        try:
            name = self.reader.read_token()
        except EndOfInput:
            return self._stay()
        if not _is_valid_filename(name):
            return self._stay(f"Invalid filename: {name}")
        target = self._current_path / name
        try:
            target.lstat()
        except FileNotFoundError:
            pass
        except OSError as exc:
            return self._stay(f"Cannot create file: {name} ({exc.strerror or exc})")
        else:
            return self._stay(f"Already exists: {name}")
        try:
            create_file(target)
        except FileOpenError as exc:
            return self._stay(str(exc))
        return self._stay()

    def browse(self) -> Path | None:
        """Run render cycles until a path is selected or browsing is cancelled.

        Running out of input counts as cancelling.
        """
        while True:
            listing = self.list_and_render()
            try:
                token = self.reader.read_token()
            except EndOfInput:
                return None
            outcome = self.handle_selection(listing, token)
            if isinstance(outcome, Selected):
                return outcome.path
            if isinstance(outcome, Cancelled):
                return None


__all__ = [
    "EXIT_TOKEN",
    "BACK_TOKEN",
    "CREATE_TOKEN",
    "SELECT_DIR_TOKEN",
    "ListingEntry",
    "Listing",
    "Browsing",
    "Selected",
    "Cancelled",
    "NavigationOutcome",
    "list_directory",
    "DirectoryNavigator",
]
