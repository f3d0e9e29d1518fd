"""Line buffer: the editable document and its cursor."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


class Direction(Enum):
    """Cursor movement directions."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


@dataclass
class CursorPosition:
    column: int = 0
    row: int = 0


class Buffer:
    """Ordered list of text lines plus a cursor.

    The document always holds at least one line, and the cursor always
    satisfies ``0 <= row < line_count()`` and
    ``0 <= column <= line_length(row)``. Every operation is either legal at
    the current position or a no-op, so nothing here raises.
    """

    lines: list[str]
    cursor: CursorPosition

    def __init__(self, lines: Optional[Iterable[str]] = None):
        self.lines = list(lines) if lines is not None else []
        if not self.lines:
            self.lines = [""]
        self.cursor = CursorPosition()
        # Column that vertical movement aims for
        self.desired_column = 0

    # --- Queries ---

    def line_count(self) -> int:
        return len(self.lines)

    def line(self, row: int) -> str:
        return self.lines[row]

    def line_length(self, row: int) -> int:
        return len(self.lines[row])

    @property
    def current_line(self) -> str:
        return self.lines[self.cursor.row]

    # --- Mutations ---

    def insert_char(self, char: str):
        """Insert a single character at the cursor and advance past it."""
        row, col = self.cursor.row, self.cursor.column
        line = self.lines[row]
        self.lines[row] = line[:col] + char + line[col:]
        self.cursor.column += 1
        self.desired_column = self.cursor.column

    def insert_newline(self):
        """Split the current line at the cursor."""
        row, col = self.cursor.row, self.cursor.column
        line = self.lines[row]
        self.lines[row] = line[:col]
        self.lines.insert(row + 1, line[col:])
        self.cursor.row = row + 1
        self.cursor.column = 0
        self.desired_column = 0

    def delete_backward(self):
        """Delete the character before the cursor.

        At the start of a line the line is joined onto the previous one and
        the cursor lands at the join point. At (0, 0) nothing happens.
        """
        row, col = self.cursor.row, self.cursor.column
        if col > 0:
            line = self.lines[row]
            self.lines[row] = line[:col - 1] + line[col:]
            self.cursor.column = col - 1
        elif row > 0:
            previous_length = len(self.lines[row - 1])
            self.lines[row - 1] += self.lines.pop(row)
            self.cursor.row = row - 1
            self.cursor.column = previous_length
        self.desired_column = self.cursor.column

    # --- Movement ---

    def move_cursor(self, direction: Direction) -> bool:
        """Move the cursor one step.

        Left and right wrap across line boundaries. Up and down keep the
        desired column where the target line is long enough and clamp to
        its end otherwise.

        Returns:
            True if the cursor moved
        """
        before = (self.cursor.column, self.cursor.row)
        if direction is Direction.LEFT:
            self._left()
        elif direction is Direction.RIGHT:
            self._right()
        elif direction is Direction.UP:
            if self.cursor.row > 0:
                self._to_row(self.cursor.row - 1)
        elif direction is Direction.DOWN:
            if self.cursor.row < len(self.lines) - 1:
                self._to_row(self.cursor.row + 1)
        return before != (self.cursor.column, self.cursor.row)

    def _left(self):
        if self.cursor.column > 0:
            self.cursor.column -= 1
        elif self.cursor.row > 0:
            self.cursor.row -= 1
            self.cursor.column = len(self.lines[self.cursor.row])
        self.desired_column = self.cursor.column

    def _right(self):
        if self.cursor.column < len(self.lines[self.cursor.row]):
            self.cursor.column += 1
        elif self.cursor.row < len(self.lines) - 1:
            self.cursor.row += 1
            self.cursor.column = 0
        self.desired_column = self.cursor.column

    def _to_row(self, row: int):
        # Vertical moves deliberately leave desired_column untouched
        self.cursor.row = row
        self.cursor.column = min(self.desired_column, len(self.lines[row]))

    def move_to_line_start(self):
        self.cursor.column = 0
        self.desired_column = 0

    def move_to_line_end(self):
        self.cursor.column = len(self.lines[self.cursor.row])
        self.desired_column = self.cursor.column

    def move_to(self, row: int, column: int = 0):
        """Place the cursor, clamping both coordinates into the document."""
        row = max(0, min(row, len(self.lines) - 1))
        column = max(0, min(column, len(self.lines[row])))
        self.cursor = CursorPosition(column=column, row=row)
        self.desired_column = column
