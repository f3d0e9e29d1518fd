"""Tests for deleting backward and joining lines."""

from nte.buffer import Buffer, CursorPosition, Direction


def test_backspace_three_times_empties_line():
    buffer = Buffer(["abc"])
    buffer.move_to(0, 3)

    for _ in range(3):
        buffer.delete_backward()

    assert buffer.lines == [""]
    assert buffer.cursor == CursorPosition(0, 0)


def test_backspace_at_line_start_joins_with_previous_line():
    buffer = Buffer(["ab", "cd"])
    buffer.move_to(1, 0)

    buffer.delete_backward()

    assert buffer.lines == ["abcd"]
    assert buffer.cursor == CursorPosition(column=2, row=0)


def test_backspace_at_document_start_is_noop():
    buffer = Buffer(["abc", "def"])

    buffer.delete_backward()

    assert buffer.lines == ["abc", "def"]
    assert buffer.cursor == CursorPosition(0, 0)


def test_backspace_in_middle_of_line():
    buffer = Buffer(["abcd"])
    buffer.move_to(0, 2)

    buffer.delete_backward()

    assert buffer.lines == ["acd"]
    assert buffer.cursor.column == 1


def test_join_onto_empty_previous_line():
    buffer = Buffer(["", "text"])
    buffer.move_to(1, 0)

    buffer.delete_backward()

    assert buffer.lines == ["text"]
    assert buffer.cursor == CursorPosition(0, 0)


def test_join_keeps_following_lines():
    buffer = Buffer(["one", "two", "three"])
    buffer.move_to(1, 0)

    buffer.delete_backward()

    assert buffer.lines == ["onetwo", "three"]
    assert buffer.line_count() == 2
    assert buffer.cursor == CursorPosition(column=3, row=0)


def test_backspace_resets_desired_column():
    buffer = Buffer(["abcdef", "abcdef"])
    buffer.move_to(0, 5)

    buffer.delete_backward()
    buffer.move_cursor(Direction.DOWN)

    assert buffer.cursor == CursorPosition(column=4, row=1)
