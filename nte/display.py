"""Terminal column layout of document text."""

from wcwidth import wcwidth

from .constants import EditorConstants

# Shown for code points that have no printable form
REPLACEMENT_CHAR = '?'


def layout(text: str, tab_width: int = EditorConstants.DEFAULT_TAB_WIDTH) -> list[str]:
    """Split text into screen cells, one string per terminal column.

    Tabs expand to the next tab stop. C0 control characters and DEL are
    shown in caret notation (ESC as ``^[``, DEL as ``^?``) and any other
    code point wcwidth reports as unprintable as ``?``. A double-width
    character occupies its first cell and leaves an empty string in the
    second; a zero-width character is attached to the cell before it.

    The layout of a prefix of ``text`` is a prefix of the layout of
    ``text``, so ``len(layout(line[:column]))`` is the screen column of
    ``column``.
    """
    cells: list[str] = []
    for char in text:
        code = ord(char)
        if char == '\t':
            cells.extend(' ' * (tab_width - len(cells) % tab_width))
        elif code < 0x20 or code == 0x7f:
            cells.extend(('^', chr(code ^ 0x40)))
        else:
            width = wcwidth(char)
            if width < 0:
                cells.append(REPLACEMENT_CHAR)
            elif width == 0:
                if cells:
                    cells[-2 if cells[-1] == '' else -1] += char
            elif width == 2:
                cells.extend((char, ''))
            else:
                cells.append(char)
    return cells


def text_width(text: str, tab_width: int = EditorConstants.DEFAULT_TAB_WIDTH) -> int:
    """Number of terminal columns text takes once laid out."""
    return len(layout(text, tab_width))
