"""nte CLI entry point.

Allows running via `python -m nte` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .constants import EditorConstants
from .settings import EditorSettings, load_settings
from .version import get_version_string

logger = logging.getLogger(__name__)


def configure_logging(settings: EditorSettings) -> None:
    """Send log records to the configured file, if any.

    The editor owns the whole screen, so records are never written to the
    terminal.
    """
    if not settings.log_file:
        return
    handler = logging.FileHandler(settings.log_file, encoding='utf-8')
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s"))
    package_logger = logging.getLogger("nte")
    package_logger.addHandler(handler)
    package_logger.setLevel(settings.log_level)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the editor on the file named on the command line.

    Returns:
        Process exit code
    """
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0
    if not args:
        print(EditorConstants.USAGE_MESSAGE)
        return 1
    filename = args[0]

    settings = load_settings()
    try:
        configure_logging(settings)
    except OSError as e:
        print(f"Cannot open log file {settings.log_file}: {e}", file=sys.stderr)

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    from .terminal import TerminalError

    editor = Editor(settings=settings)
    try:
        editor.load_file(filename)
    except FileNotFoundError:
        print(EditorConstants.NEW_FILE_MESSAGE.format(filename))
        try:
            editor.create_file(filename)
        except OSError as e:
            print(EditorConstants.CREATE_ERROR_MESSAGE.format(e))
            return 1
    except (OSError, UnicodeDecodeError) as e:
        print(EditorConstants.READ_ERROR_MESSAGE.format(e))
        return 1

    try:
        editor.run()
    except (TerminalError, OSError) as e:
        logger.error("session ended with an error: %s", e)
        print(EditorConstants.SESSION_ERROR_MESSAGE.format(e))
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
