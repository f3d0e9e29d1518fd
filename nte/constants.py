"""Constants and configuration for the nte editor."""


class EditorConstants:
    """Central configuration constants for the editor."""

    # Screen layout
    STATUS_LINE_HEIGHT = 1  # Rows above the text reserved for the status line

    # Display
    DEFAULT_TAB_WIDTH = 8
    MIN_TAB_WIDTH = 1
    MAX_TAB_WIDTH = 16

    # Command keys, as (KeyType.CTRL) letters
    SAVE_KEY = 's'
    QUIT_KEY = 'q'
    CONFIRM_EXIT_KEY = 'x'

    # Settings
    SETTINGS_APP_NAME = "nte"
    SETTINGS_FILENAME = "settings.json"
    DEFAULT_LOG_LEVEL = "WARNING"

    # Messages
    USAGE_MESSAGE = "Usage: nte <filename>"
    NEW_FILE_MESSAGE = "File {} doesn't exist. Creating a new file."
    CREATE_ERROR_MESSAGE = "Error creating file: {}"
    READ_ERROR_MESSAGE = "Error reading file: {}"
    SESSION_ERROR_MESSAGE = "Error: {}"
    EDITING_MESSAGE = "Editing: {}"
    MODIFIED_MARKER = " [modified]"
    POSITION_MESSAGE = "Ln {}, Col {}"
    SAVED_MESSAGE = "Saved to {}"
    SAVE_ERROR_MESSAGE = "Error: cannot save {}: {}"
    CONFIRM_EXIT_MESSAGE = "Press Ctrl-X again to confirm exit"
