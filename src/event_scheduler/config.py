import os


class Config:
    """
    Application configuration constants.

    Environment-aware configuration for the event scheduler.
    Set EVENT_SCHEDULER_FILE to point at a different events file and
    EVENT_SCHEDULER_HOME to move the log directory.
    """

    # ============================================
    # VERSION & ENVIRONMENT
    # ============================================

    VERSION = "1.0.0"
    APP_NAME = "Event Scheduler"

    # ============================================
    # PERSISTENCE
    # ============================================

    # Relative paths resolve against the working directory of the process
    EVENTS_FILE = os.getenv("EVENT_SCHEDULER_FILE", "events.txt")
    LINES_PER_RECORD = 3  # title, date, time
    FILE_ENCODING = "utf-8"

    # ============================================
    # STORAGE & LOGGING
    # ============================================

    STORAGE_HOME = os.getenv(
        "EVENT_SCHEDULER_HOME",
        os.path.join(os.path.expanduser("~"), ".event_scheduler"),
    )
    LOG_FILE = "event_scheduler.log"
    LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    # ============================================
    # INPUT FORMATS
    # ============================================

    DATE_FORMAT_HINT = "YYYY-MM-DD"
    TIME_FORMAT_HINT = "HH:MM"
    DATE_LENGTH = 10
    TIME_LENGTH = 5

    # ============================================
    # MENU
    # ============================================

    MENU_OPTIONS = (
        "Add Event",
        "View Events",
        "Edit Event",
        "Delete Event",
        "Search Event",
        "View Total Events",
        "Exit",
    )
    EXIT_CHOICE = 7

    # ============================================
    # USER INTERFACE SETTINGS
    # ============================================

    TERMINAL_MAX_WIDTH = 120  # Maximum terminal width for UI
    PAUSE_ON_START = True  # Wait for Enter after the welcome banner

    # ============================================
    # METHODS
    # ============================================

    @classmethod
    def get_events_path(cls) -> str:
        """
        Get the absolute path of the events file.

        Returns:
            Path resolved against the current working directory
        """
        return os.path.abspath(cls.EVENTS_FILE)

    @classmethod
    def print_config_summary(cls):
        """Print configuration summary (useful for debugging)."""
        print(f"\n{cls.APP_NAME} v{cls.VERSION}")
        print(f"Events file: {cls.get_events_path()}")
        print(f"Log file: {os.path.join(cls.STORAGE_HOME, cls.LOG_FILE)}")
        print(f"Date format: {cls.DATE_FORMAT_HINT}")
        print(f"Time format: {cls.TIME_FORMAT_HINT}\n")


# ============================================
# VALIDATION
# ============================================


def validate_config():
    """
    Validate configuration parameters are consistent.

    Raises:
        ValueError: If configuration is inconsistent
    """
    errors = []

    if not Config.EVENTS_FILE:
        errors.append("Events file path cannot be empty")

    if len(Config.MENU_OPTIONS) != Config.EXIT_CHOICE:
        errors.append("Exit must be the last menu option")

    if Config.LINES_PER_RECORD != 3:
        errors.append("Records are stored as exactly three lines")

    if errors:
        raise ValueError(
            "Configuration validation failed:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )


# Run validation on import
try:
    validate_config()
except ValueError as e:
    import logging

    logging.warning(f"Configuration validation warning: {e}")


if __name__ == "__main__":
    Config.print_config_summary()
