"""Tests for arrow-key cursor movement in the buffer."""

from nte.buffer import Buffer, CursorPosition, Direction


def test_right_moves_within_line():
    buffer = Buffer(["abc"])
    assert buffer.move_cursor(Direction.RIGHT)
    assert buffer.cursor == CursorPosition(1, 0)


def test_right_at_end_of_line_wraps_to_next_line():
    buffer = Buffer(["ab", "cd"])
    buffer.move_to(0, 2)

    assert buffer.move_cursor(Direction.RIGHT)
    assert buffer.cursor == CursorPosition(column=0, row=1)


def test_right_at_end_of_document_stays():
    buffer = Buffer(["ab", "cd"])
    buffer.move_to(1, 2)

    assert not buffer.move_cursor(Direction.RIGHT)
    assert buffer.cursor == CursorPosition(column=2, row=1)


def test_left_at_line_start_wraps_to_end_of_previous_line():
    buffer = Buffer(["abc", "de"])
    buffer.move_to(1, 0)

    assert buffer.move_cursor(Direction.LEFT)
    assert buffer.cursor == CursorPosition(column=3, row=0)


def test_left_at_document_start_stays():
    buffer = Buffer(["abc"])
    assert not buffer.move_cursor(Direction.LEFT)
    assert buffer.cursor == CursorPosition(0, 0)


def test_up_at_first_row_does_not_move():
    buffer = Buffer(["abc", "def"])
    buffer.move_to(0, 2)
    assert not buffer.move_cursor(Direction.UP)
    assert buffer.cursor == CursorPosition(column=2, row=0)


def test_down_at_last_row_does_not_move():
    buffer = Buffer(["abc", "def"])
    buffer.move_to(1, 1)
    assert not buffer.move_cursor(Direction.DOWN)
    assert buffer.cursor == CursorPosition(column=1, row=1)


def test_down_clamps_column_to_shorter_line():
    buffer = Buffer(["a long line", "short"])
    buffer.move_to(0, 10)

    buffer.move_cursor(Direction.DOWN)

    assert buffer.cursor == CursorPosition(column=5, row=1)
    assert buffer.cursor.column <= buffer.line_length(1)


def test_up_clamps_column_to_shorter_line():
    buffer = Buffer(["ab", "a long line"])
    buffer.move_to(1, 9)

    buffer.move_cursor(Direction.UP)

    assert buffer.cursor == CursorPosition(column=2, row=0)


def test_vertical_movement_restores_desired_column():
    buffer = Buffer(["a long line", "", "another long line"])
    buffer.move_to(0, 8)

    buffer.move_cursor(Direction.DOWN)
    assert buffer.cursor == CursorPosition(column=0, row=1)

    buffer.move_cursor(Direction.DOWN)
    assert buffer.cursor == CursorPosition(column=8, row=2)

    buffer.move_cursor(Direction.UP)
    buffer.move_cursor(Direction.UP)
    assert buffer.cursor == CursorPosition(column=8, row=0)


def test_horizontal_movement_resets_desired_column():
    buffer = Buffer(["abcdefgh", "abcdefgh"])
    buffer.move_to(0, 6)
    buffer.move_cursor(Direction.LEFT)
    buffer.move_cursor(Direction.LEFT)

    buffer.move_cursor(Direction.DOWN)

    assert buffer.cursor == CursorPosition(column=4, row=1)


def test_home_and_end():
    buffer = Buffer(["hello world"])
    buffer.move_to(0, 4)

    buffer.move_to_line_end()
    assert buffer.cursor.column == 11

    buffer.move_to_line_start()
    assert buffer.cursor.column == 0


def test_move_to_clamps_out_of_range_positions():
    buffer = Buffer(["abc", "de"])

    buffer.move_to(10, 10)
    assert buffer.cursor == CursorPosition(column=2, row=1)

    buffer.move_to(-3, -1)
    assert buffer.cursor == CursorPosition(0, 0)
