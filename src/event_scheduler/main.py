# File: src/event_scheduler/main.py
"""Application entry point."""

import sys

from event_scheduler.ui.cli import start_application


def main():
    """Initializes and runs the application."""
    sys.exit(start_application())


if __name__ == "__main__":
    main()
