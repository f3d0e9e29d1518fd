"""Tests for laying out line text in terminal columns."""

from nte.display import layout, text_width


def test_plain_ascii_is_one_cell_per_character():
    assert layout("abc") == ['a', 'b', 'c']


def test_tab_expands_to_next_stop():
    assert layout("ab\tc", tab_width=4) == ['a', 'b', ' ', ' ', 'c']


def test_control_characters_use_caret_notation():
    assert layout("\x1b\x00\x7f") == ['^', '[', '^', '@', '^', '?']


def test_c1_control_is_replaced():
    assert layout("a\x9bb") == ['a', '?', 'b']


def test_wide_character_leaves_empty_second_cell():
    assert layout("日x") == ['日', '', 'x']
    assert text_width("日本x") == 5


def test_combining_mark_joins_previous_cell():
    assert layout("e\u0301x") == ["e\u0301", "x"]
    assert layout("日\u0301") == ["日\u0301", ""]


def test_prefix_width_matches_full_layout():
    line = "\t日\x1bz"
    for column in range(len(line) + 1):
        prefix = layout(line[:column], tab_width=4)
        assert layout(line, tab_width=4)[:len(prefix)] == prefix
