"""Command pattern implementation for editor actions."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .buffer import Direction
from .constants import EditorConstants
from .keyboard import KeyType, is_printable

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command

        Returns:
            True if the command modified the document
        """
        pass


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Movement commands don't modify the document."""
        self._move(editor, key_event)
        editor.viewport.follow(editor.buffer.cursor.row)
        return False

    @abstractmethod
    def _move(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the movement."""
        pass


class LeftCharCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.buffer.move_cursor(Direction.LEFT)


class RightCharCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.buffer.move_cursor(Direction.RIGHT)


class UpLineCommand(MovementCommand):
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        if editor.buffer.move_cursor(Direction.UP):
            editor.viewport.follow(editor.buffer.cursor.row)
        else:
            # Already on the first row: scroll the window alone
            editor.viewport.scroll_up()
        return False

    def _move(self, editor, key_event):
        editor.buffer.move_cursor(Direction.UP)


class DownLineCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.buffer.move_cursor(Direction.DOWN)


class BeginningOfLineCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.buffer.move_to_line_start()


class EndOfLineCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.buffer.move_to_line_end()


class EditCommand(EditorCommand):
    """Base class for editing commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Editing commands modify the document."""
        self._edit(editor, key_event)
        editor.viewport.follow(editor.buffer.cursor.row)
        return True

    @abstractmethod
    def _edit(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the edit."""
        pass


class BackspaceCommand(EditCommand):
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        cursor = editor.buffer.cursor
        if cursor.row == 0 and cursor.column == 0:
            return False
        return super().execute(editor, key_event)

    def _edit(self, editor, key_event):
        editor.buffer.delete_backward()


class InsertNewlineCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.buffer.insert_newline()


class InsertTabCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.buffer.insert_char('\t')


class InsertTextCommand(EditCommand):
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        # Control characters are not text
        if not is_printable(key_event):
            return False
        return super().execute(editor, key_event)

    def _edit(self, editor, key_event):
        editor.buffer.insert_char(key_event.value)


class SystemCommand(EditorCommand):
    """Base class for system commands like save and quit."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """System commands don't modify document content directly."""
        self._execute_system(editor, key_event)
        return False

    @abstractmethod
    def _execute_system(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the system action."""
        pass


class SaveCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.save()


class QuitCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.quit()


class ConfirmExitCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.request_exit_confirmation()


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._insert_text = InsertTextCommand()
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # System commands
        self.register((KeyType.CTRL, EditorConstants.SAVE_KEY), SaveCommand())
        self.register((KeyType.CTRL, EditorConstants.QUIT_KEY), QuitCommand())
        self.register((KeyType.CTRL, EditorConstants.CONFIRM_EXIT_KEY), ConfirmExitCommand())

        # Editing commands
        self.register((KeyType.SPECIAL, 'enter'), InsertNewlineCommand())
        self.register((KeyType.SPECIAL, 'tab'), InsertTabCommand())
        self.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())

        # Movement commands
        self.register((KeyType.SPECIAL, 'left'), LeftCharCommand())
        self.register((KeyType.SPECIAL, 'right'), RightCharCommand())
        self.register((KeyType.SPECIAL, 'up'), UpLineCommand())
        self.register((KeyType.SPECIAL, 'down'), DownLineCommand())
        self.register((KeyType.SPECIAL, 'home'), BeginningOfLineCommand())
        self.register((KeyType.SPECIAL, 'end'), EndOfLineCommand())
        self.register((KeyType.CTRL, 'a'), BeginningOfLineCommand())
        self.register((KeyType.CTRL, 'e'), EndOfLineCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Returns:
            True if the document was modified
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command:
            return command.execute(editor, key_event)

        # Handle regular text input
        if key_event.key_type == KeyType.CHAR:
            return self._insert_text.execute(editor, key_event)

        return False
