"""Reading and writing documents as lists of lines."""

import logging
import os
import stat
import tempfile

logger = logging.getLogger(__name__)


def read_lines(filename: str) -> list[str]:
    """Read a UTF-8 text file into a list of lines.

    Lines are split on '\\n' and a trailing '\\r' is dropped from each. A
    final newline does not produce an extra empty line, and an empty file
    reads as a single empty line.

    Raises:
        FileNotFoundError: if the file does not exist
        OSError: if it exists but cannot be read
        UnicodeDecodeError: if it is not valid UTF-8
    """
    with open(filename, 'r', encoding='utf-8', newline='') as f:
        content = f.read()
    if not content:
        return [""]
    lines = content.split('\n')
    if content.endswith('\n'):
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def _current_umask() -> int:
    # os.umask can only be read by setting it. The umask is process-wide,
    # so this must not run while another thread creates files; the editor
    # runs on a single thread.
    umask = os.umask(0)
    os.umask(umask)
    return umask


def write_lines(filename: str, lines: list[str]) -> None:
    """Write lines to a file, each followed by a newline, atomically.

    The text goes to a temporary file in the same directory (same
    filesystem, so the rename is atomic) which then replaces the target.
    An existing file's permission bits are kept.

    Raises:
        OSError: if the file cannot be written; the temporary file is removed
    """
    dir_name = os.path.dirname(filename) or '.'
    try:
        mode = stat.S_IMODE(os.stat(filename).st_mode)
    except FileNotFoundError:
        # New files get the usual umask-derived mode, not mkstemp's 0600
        mode = 0o666 & ~_current_umask()

    temp_filename = None
    try:
        with tempfile.NamedTemporaryFile(mode='w', encoding='utf-8', newline='',
                                         dir=dir_name, prefix='.', suffix='.tmp',
                                         delete=False) as temp_file:
            temp_filename = temp_file.name
            for line in lines:
                temp_file.write(line + '\n')
            temp_file.flush()
            os.fsync(temp_file.fileno())
        os.chmod(temp_filename, mode)
        os.replace(temp_filename, filename)
    except OSError:
        if temp_filename is not None and os.path.exists(temp_filename):
            os.remove(temp_filename)
        raise
    logger.info("wrote %d lines to %s", len(lines), filename)
