"""Main editor controller: one interactive session on one file."""

import logging
from enum import Enum
from typing import Optional

from .buffer import Buffer
from .commands import CommandRegistry
from .constants import EditorConstants
from .display import layout, text_width
from .fileio import read_lines, write_lines
from .keyboard import KeyEvent, KeyType
from .settings import EditorSettings
from .terminal import Color, TerminalError, TerminalInterface
from .viewport import Viewport

logger = logging.getLogger(__name__)


class SessionState(Enum):
    RUNNING = "running"
    CONFIRMING_EXIT = "confirming_exit"
    TERMINATED = "terminated"


class Editor:
    """Session controller.

    Owns the buffer and the viewport, turns key events into commands and
    redraws the screen after each one through the terminal interface.
    """

    def __init__(self, terminal=None, settings: Optional[EditorSettings] = None):
        """Initialize the editor components.

        Args:
            terminal: Screen/input capability; a TerminalInterface by default
            settings: User settings; defaults when omitted
        """
        self.terminal = terminal if terminal is not None else TerminalInterface()
        self.settings = settings or EditorSettings()
        self.buffer = Buffer()
        self.viewport = Viewport()
        self.command_registry = CommandRegistry()
        self.state = SessionState.RUNNING
        # File handling
        self.filename: Optional[str] = None
        self.modified = False
        self.status_message: Optional[str] = None
        self.status_is_error = False

    # --- Files ---

    def load_file(self, filename: str):
        """Load a file into the editor.

        Raises:
            FileNotFoundError: if the file does not exist
            OSError, UnicodeDecodeError: if it cannot be read
        """
        lines = read_lines(filename)
        self.filename = filename
        self.buffer = Buffer(lines)
        self.viewport = Viewport(visible_row_count=self.viewport.visible_row_count)
        self.modified = False
        logger.info("loaded %s (%d lines)", filename, len(lines))

    def create_file(self, filename: str):
        """Start an empty document and write it out as a new file.

        Raises:
            OSError: if the file cannot be created
        """
        self.filename = filename
        self.buffer = Buffer()
        self.viewport = Viewport(visible_row_count=self.viewport.visible_row_count)
        write_lines(filename, self.buffer.lines)
        self.modified = False
        logger.info("created %s", filename)

    def save(self) -> bool:
        """Save the document to its file.

        A failure is reported in the status line and the session carries
        on with the document still marked modified.

        Returns:
            True if the save succeeded
        """
        try:
            write_lines(self.filename, self.buffer.lines)
        except OSError as e:
            logger.error("saving %s failed: %s", self.filename, e)
            reason = e.strerror or str(e)
            self._set_status(EditorConstants.SAVE_ERROR_MESSAGE.format(self.filename, reason),
                             error=True)
            return False
        self.modified = False
        self._set_status(EditorConstants.SAVED_MESSAGE.format(self.filename))
        return True

    # --- Session state ---

    @property
    def running(self) -> bool:
        return self.state is not SessionState.TERMINATED

    def quit(self):
        """End the session without saving."""
        self.state = SessionState.TERMINATED

    def request_exit_confirmation(self):
        """Ask for the confirm-exit key a second time."""
        self.state = SessionState.CONFIRMING_EXIT

    def _set_status(self, message: str, error: bool = False):
        self.status_message = message
        self.status_is_error = error

    # --- Main loop ---

    def run(self):
        """Run the interactive loop until the session terminates.

        Raises:
            TerminalError: if the terminal cannot be set up or reports an
                input error
        """
        with self.terminal:
            self.state = SessionState.RUNNING
            try:
                while self.running:
                    self._draw()
                    self._handle_key_event(self.terminal.poll_event())
            except KeyboardInterrupt:
                logger.info("interrupted, ending session")
                self.state = SessionState.TERMINATED

    def _handle_key_event(self, key_event: KeyEvent):
        """Handle a keyboard event.

        Args:
            key_event: KeyEvent object with parsed key information
        """
        if key_event.key_type is KeyType.ERROR:
            self.state = SessionState.TERMINATED
            raise TerminalError(key_event.value)

        # Clear status message on any keypress
        self.status_message = None
        self.status_is_error = False

        if self.state is SessionState.CONFIRMING_EXIT:
            self._handle_exit_confirmation(key_event)
            return

        was_modified = self.command_registry.execute(self, key_event)
        if was_modified:
            self.modified = True

    def _handle_exit_confirmation(self, key_event: KeyEvent):
        """Second key after the confirm-exit prompt: quit or dismiss it."""
        if (key_event.key_type is KeyType.CTRL
                and key_event.value == EditorConstants.CONFIRM_EXIT_KEY):
            self.state = SessionState.TERMINATED
        else:
            self.state = SessionState.RUNNING

    # --- Drawing ---

    def _display_column(self, row: int, column: int) -> int:
        """Screen column of a buffer column once the line is laid out."""
        return text_width(self.buffer.line(row)[:column], self.settings.tab_width)

    def _print_string(self, x: int, y: int, text: str, width: int,
                      fg: int = Color.DEFAULT, bg: int = Color.DEFAULT):
        cells = layout(text, self.settings.tab_width)
        for i, cell in enumerate(cells[:max(0, width - x)]):
            self.terminal.set_cell(x + i, y, cell, fg, bg)

    def _draw_status_line(self, width: int):
        if self.status_message:
            fg = Color.RED if self.status_is_error else Color.WHITE
            self._print_string(0, 0, self.status_message, width, fg=fg)
            return
        left = EditorConstants.EDITING_MESSAGE.format(self.filename or "")
        if self.modified:
            left += EditorConstants.MODIFIED_MARKER
        cursor = self.buffer.cursor
        right = EditorConstants.POSITION_MESSAGE.format(cursor.row + 1, cursor.column + 1)
        self._print_string(0, 0, left, width, fg=Color.WHITE)
        if text_width(left) + len(right) + 1 < width:
            self._print_string(width - len(right) - 1, 0, right, width, fg=Color.WHITE)

    def _draw(self):
        """Draw the current editor state to the terminal."""
        width, height = self.terminal.terminal_size()
        top = EditorConstants.STATUS_LINE_HEIGHT
        cursor = self.buffer.cursor
        self.viewport.resize(height - top, cursor.row, self.buffer.line_count())

        self.terminal.clear()
        self._draw_status_line(width)

        rows = self.viewport.visible_rows(self.buffer.line_count())
        for y, row in enumerate(rows, start=top):
            self._print_string(0, y, self.buffer.line(row), width)

        if self.state is SessionState.CONFIRMING_EXIT:
            prompt_y = min(top + len(rows), height - 1)
            self._print_string(0, prompt_y, EditorConstants.CONFIRM_EXIT_MESSAGE, width,
                               fg=Color.RED)

        if self.viewport.contains(cursor.row):
            x = min(self._display_column(cursor.row, cursor.column), max(0, width - 1))
            self.terminal.set_cursor(x, cursor.row - self.viewport.first_visible_row + top)
        else:
            # Only after a peek above the first document row
            self.terminal.hide_cursor()
        self.terminal.flush()
