"""Keyboard input: curtsies key tokens mapped to one tagged event type."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    CHAR = "char"        # A printable code point, space included
    SPECIAL = "special"  # Named keys: arrows, enter, tab, backspace, ...
    CTRL = "ctrl"        # Ctrl + letter
    ERROR = "error"      # The terminal reported an input error


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 's' for Ctrl-S)
    raw: str = ""  # The token as curtsies reported it

    @classmethod
    def error(cls, exc: BaseException) -> "KeyEvent":
        """Build an error event from an exception raised while reading input."""
        return cls(key_type=KeyType.ERROR, value=str(exc) or type(exc).__name__)


SPECIAL_KEYS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace',
    'delete', 'page_up', 'page_down', 'insert', 'tab',
}

# Ctrl-letters that terminals deliver for named keys
_CTRL_ALIASES = {
    'j': 'enter',
    'm': 'enter',
    'h': 'backspace',
    'i': 'tab',
}


def parse_key(token: str) -> KeyEvent:
    """Parse a curtsies key token into a KeyEvent.

    Args:
        token: String form of a curtsies event, e.g. 'a', '<UP>', '<Ctrl-s>'

    Returns:
        Parsed KeyEvent
    """
    if len(token) == 1:
        return _parse_char(token)

    # Curtsies-style key names like '<LEFT>', '<Ctrl-s>', '<Esc+u>'
    if token.startswith('<') and token.endswith('>'):
        lower = token[1:-1].lower().replace('+', '-')
        parts = lower.split('-')
        base = parts[-1]
        mods = set(parts[:-1])
        if base in ('pageup', 'page_up'):
            base = 'page_up'
        elif base in ('pagedown', 'page_down'):
            base = 'page_down'

        if not mods:
            if base in ('space', 'spacebar', 'spc'):
                return KeyEvent(key_type=KeyType.CHAR, value=' ', raw=token)
            if base in ('esc', 'escape'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=token)
            if base in SPECIAL_KEYS:
                return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=token)
        elif mods == {'ctrl'} and len(base) == 1:
            if base in _CTRL_ALIASES:
                return KeyEvent(key_type=KeyType.SPECIAL, value=_CTRL_ALIASES[base], raw=token)
            return KeyEvent(key_type=KeyType.CTRL, value=base, raw=token)
        # Unbound combination; the full name keeps it from matching a plain key
        return KeyEvent(key_type=KeyType.SPECIAL, value=lower, raw=token)

    # Unrecognized multi-character escape sequence
    return KeyEvent(key_type=KeyType.SPECIAL, value=token, raw=token)


def _parse_char(char: str) -> KeyEvent:
    if char in ('\n', '\r'):
        return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=char)
    if char == '\t':
        return KeyEvent(key_type=KeyType.SPECIAL, value='tab', raw=char)
    if char in ('\x7f', '\x08'):
        return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=char)
    if char == '\x1b':
        return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=char)
    o = ord(char)
    if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z
        return KeyEvent(key_type=KeyType.CTRL, value=chr(ord('a') + o - 1), raw=char)
    return KeyEvent(key_type=KeyType.CHAR, value=char, raw=char)


def is_printable(event: Optional[KeyEvent]) -> bool:
    """True for character events that should be inserted into the text."""
    if event is None or event.key_type is not KeyType.CHAR or len(event.value) != 1:
        return False
    return ord(event.value) >= 32 and event.value != '\x7f'
