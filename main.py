#!/usr/bin/env python3
"""nte - a minimal terminal text editor.

Usage:
    python main.py <filename>

Controls:
    Arrow keys, Home/End: Move the cursor
    Ctrl-S: Save file
    Ctrl-Q: Quit immediately (unsaved changes are lost)
    Ctrl-X: Quit after pressing Ctrl-X a second time
    Type to insert text, Enter to split a line, Tab for a tab character
    Backspace: Delete character (joins lines at line start)
"""

import sys
from nte.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
