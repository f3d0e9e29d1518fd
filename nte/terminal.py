"""Terminal interface using Blessed for display and Curtsies for input."""

import logging
import sys
import termios
from collections import deque
from typing import Optional

import blessed
from curtsies import Input
from curtsies.events import PasteEvent
from wcwidth import wcwidth

from .keyboard import KeyEvent, parse_key

logger = logging.getLogger(__name__)


class TerminalError(Exception):
    """The terminal could not be set up or reported a fatal input error."""


class Color:
    """Terminal color numbers; DEFAULT leaves the terminal's own color."""
    DEFAULT = -1
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


BLANK_CELL = (' ', Color.DEFAULT, Color.DEFAULT)


class TerminalInterface:
    """Cell-grid screen plus key events on top of a real terminal.

    Drawing goes into an in-memory grid; ``flush`` writes the rows that
    changed since the previous frame. Use as a context manager so the
    terminal is always restored, even when the session fails.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._input: Optional[Input] = None
        self._old_settings = None
        self._pending: deque = deque()
        self._cells: dict = {}
        self._cursor: Optional[tuple[int, int]] = None
        # Rows written by the last flush, for minimal updates
        self._last_rows: Optional[list[str]] = None

    def __enter__(self) -> "TerminalInterface":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.cleanup()

    def setup(self):
        """Enter fullscreen and raw input mode."""
        try:
            self._input = Input(keynames='curtsies')
            self._input.__enter__()
        except (termios.error, OSError) as e:
            self._input = None
            raise TerminalError(f"cannot initialize terminal: {e}") from e
        self._disable_flow_control()
        print(self.term.enter_fullscreen + self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        self._last_rows = None
        logger.debug("terminal set up (%sx%s)", self.term.width, self.term.height)

    def _disable_flow_control(self):
        # Ctrl-S and Ctrl-Q are XOFF/XON unless IXON/IXOFF are cleared
        try:
            self._old_settings = termios.tcgetattr(sys.stdin)
            new_settings = list(self._old_settings)
            new_settings[0] &= ~(termios.IXON | termios.IXOFF)
            termios.tcsetattr(sys.stdin, termios.TCSANOW, new_settings)
        except (termios.error, OSError) as e:
            self._old_settings = None
            logger.warning("could not disable flow control: %s", e)

    def cleanup(self):
        """Exit fullscreen and restore the terminal."""
        if self._old_settings is not None:
            try:
                termios.tcsetattr(sys.stdin, termios.TCSANOW, self._old_settings)
            except (termios.error, OSError) as e:
                logger.warning("could not restore tty settings: %s", e)
            self._old_settings = None
        if self._input is not None:
            try:
                self._input.__exit__(None, None, None)
            finally:
                self._input = None
        if self.is_fullscreen:
            print(self.term.normal + self.term.exit_fullscreen + self.term.normal_cursor,
                  end='', flush=True)
            self.is_fullscreen = False

    # --- Drawing ---

    def clear(self):
        """Blank the back buffer; nothing is written until flush."""
        self._cells.clear()

    def set_cell(self, x: int, y: int, char: str,
                 fg: int = Color.DEFAULT, bg: int = Color.DEFAULT):
        self._cells[(x, y)] = (char, fg, bg)

    def set_cursor(self, x: int, y: int):
        self._cursor = (x, y)

    def hide_cursor(self):
        self._cursor = None

    def _style(self, fg: int, bg: int) -> str:
        style = ''
        if fg != Color.DEFAULT:
            style += self.term.color(fg)
        if bg != Color.DEFAULT:
            style += self.term.on_color(bg)
        return style

    def _compose_row(self, y: int, width: int) -> str:
        """Render one grid row to a string, grouping runs of equal colors.

        A double-width character covers the cell after it, which renders
        as nothing. One that would be cut by the right edge, and a lone
        empty cell, render as a blank.
        """
        out = []
        run_colors = None
        run_chars: list[str] = []

        def end_run():
            if not run_chars:
                return
            style = self._style(*run_colors)
            text = ''.join(run_chars)
            out.append(style + text + self.term.normal if style else text)

        wide = False
        for x in range(width):
            char, fg, bg = self._cells.get((x, y), BLANK_CELL)
            if wide:
                char = ''
                wide = False
            else:
                wide = bool(char) and wcwidth(char[0]) == 2
                if not char or (wide and x == width - 1):
                    char = ' '
                    wide = False
            if (fg, bg) != run_colors:
                end_run()
                run_colors = (fg, bg)
                run_chars = []
            run_chars.append(char)
        end_run()
        return ''.join(out)

    def flush(self):
        """Write changed rows and position the cursor."""
        width, height = self.terminal_size()
        rows = []
        for y in range(height):
            # Writing the bottom-right cell scrolls some terminals
            rows.append(self._compose_row(y, width - 1 if y == height - 1 else width))

        out = []
        if self._last_rows is None or len(self._last_rows) != len(rows):
            out.append(self.term.home + self.term.clear)
            self._last_rows = [''] * len(rows)
        for y, row in enumerate(rows):
            if row != self._last_rows[y]:
                out.append(self.term.move_yx(y, 0) + row)
                self._last_rows[y] = row

        if self._cursor is None:
            out.append(self.term.hide_cursor)
        else:
            x, y = self._cursor
            out.append(self.term.move_yx(y, x) + self.term.normal_cursor)
        print(''.join(out), end='', flush=True)

    def terminal_size(self) -> tuple[int, int]:
        return self.term.width, self.term.height

    # --- Input ---

    def poll_event(self) -> KeyEvent:
        """Block until the next key and return it as a KeyEvent.

        A paste arrives from curtsies as one event holding many keys; those
        are handed out one per call. Read failures become ERROR events.
        """
        while not self._pending:
            if self._input is None:
                return KeyEvent.error(TerminalError("terminal input is not initialized"))
            try:
                event = next(self._input)
            except OSError as e:
                logger.error("terminal input failed: %s", e)
                return KeyEvent.error(e)
            if event is None:
                continue
            if isinstance(event, PasteEvent):
                self._pending.extend(event.events)
            else:
                self._pending.append(event)
        return parse_key(str(self._pending.popleft()))
