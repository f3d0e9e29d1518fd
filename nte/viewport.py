"""Viewport: which document rows are on screen."""

from dataclasses import dataclass


@dataclass
class Viewport:
    """A window of ``visible_row_count`` rows starting at ``first_visible_row``.

    The editor calls ``follow`` after every cursor movement or edit so the
    cursor row stays on screen, scrolling by exactly the overshoot.
    """
    first_visible_row: int = 0
    visible_row_count: int = 1

    @property
    def end_row(self) -> int:
        """One past the last row the window can show."""
        return self.first_visible_row + self.visible_row_count

    def contains(self, row: int) -> bool:
        return self.first_visible_row <= row < self.end_row

    def follow(self, cursor_row: int):
        """Scroll the minimum amount that brings ``cursor_row`` into view."""
        if cursor_row < self.first_visible_row:
            self.first_visible_row = max(0, cursor_row)
        elif cursor_row >= self.end_row:
            self.first_visible_row = cursor_row - self.visible_row_count + 1

    def scroll_up(self) -> bool:
        """Scroll up one row without moving the cursor.

        Used when Up is pressed on the first document row while the window
        sits below row 0, to peek above it. ``follow`` runs after every
        command, so an interactive session never leaves the window below a
        cursor on row 0; only a caller that sets ``first_visible_row``
        directly reaches this with something to scroll.
        """
        if self.first_visible_row > 0:
            self.first_visible_row -= 1
            return True
        return False

    def resize(self, visible_row_count: int, cursor_row: int, line_count: int):
        """Adopt a new window height.

        A cursor below the window is scrolled into view, and a window that
        runs past the end of the document is pulled back so it is filled
        with as many rows as the document has.
        """
        self.visible_row_count = max(1, visible_row_count)
        if cursor_row >= self.end_row:
            self.follow(cursor_row)
        # cursor_row < line_count, so the cursor stays in view
        self.first_visible_row = min(self.first_visible_row,
                                     max(0, line_count - self.visible_row_count))

    def visible_rows(self, line_count: int) -> range:
        """Document rows currently on screen."""
        start = min(self.first_visible_row, line_count)
        return range(start, min(self.end_row, line_count))
