"""Initializes and configures the argparse parser for the command line."""

import argparse
import sys

from event_scheduler.config import Config
from event_scheduler.ui import colors


class CustomHelpFormatter(argparse.HelpFormatter):
    """Custom formatter that colorizes help text."""

    def format_help(self):
        """Add color to usage line."""
        help_text = super().format_help()
        return help_text.replace(
            "usage:", f"{colors.Colors.BRIGHT_YELLOW}Usage:{colors.Colors.RESET}"
        )


class CustomParser(argparse.ArgumentParser):
    """Custom parser that shows help on error instead of just error message."""

    def error(self, message):
        """Show help message when argument parsing fails."""
        sys.stderr.write(
            f"{colors.Colors.ERROR}Error: {message}{colors.Colors.RESET}\n\n"
        )
        self.print_help(sys.stderr)
        sys.exit(2)


def initialize_parser():
    """
    Build and return the argparse parser for process options.

    Options:
    - --file: events file to load and save
    - --verbose: debug-level logging
    - --version: print version and exit

    Returns:
        Configured ArgumentParser instance
    """
    parser = CustomParser(
        prog="event-scheduler",
        description=f"{Config.APP_NAME} v{Config.VERSION} - Personal event list in your terminal",
        formatter_class=CustomHelpFormatter,
    )

    parser.add_argument(
        "-f",
        "--file",
        default=None,
        metavar="PATH",
        help=f"Events file to use (default: {Config.EVENTS_FILE})",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Write debug details to the activity log",
    )

    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"{Config.APP_NAME} v{Config.VERSION}",
        help="Show version information and exit",
    )

    return parser
