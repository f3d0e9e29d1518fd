"""nte - a minimal full-screen terminal text editor."""

import logging

from .buffer import Buffer, CursorPosition, Direction
from .viewport import Viewport
from .editor import Editor, SessionState

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Buffer',
    'CursorPosition',
    'Direction',
    'Viewport',
    'Editor',
    'SessionState',
]
