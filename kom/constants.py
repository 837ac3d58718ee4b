"""Constants and configuration defaults for the kom pager."""

class PagerConstants:
    """Central configuration constants for the pager."""

    APP_NAME = "kom"

    # Keyboard timing
    ESCAPE_DELAY = 0.05  # Wait for the rest of an escape sequence (seconds)
    MOUSE_QUERY_TIMEOUT = 0.25  # Terminal answer to the DEC mouse mode query (seconds)

    # Logging
    LOG_LEVEL_ENV = "KOM_LOG_LEVEL"
    LOG_FILE_ENV = "KOM_LOG_FILE"
    MOUSE_ENV = "KOM_MOUSE"
    DEFAULT_LOG_LEVEL = "info"
    LOG_FILE_PREFIX = "kom.log."
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # Configuration
    SETTINGS_FILENAME = "settings.json"

    # Status messages
    NOT_A_TTY_MESSAGE = "Expected stdout to be a TTY!"
    USAGE = "Usage: kom [--version] [FILENAME]"
