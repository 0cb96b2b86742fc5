"""Handles all user-facing output and prompts."""

import shutil
from typing import List, Optional

from event_scheduler.config import Config
from event_scheduler.core.event import Event
from event_scheduler.ui.colors import Colors
from event_scheduler.utils.formatters import EventFormatter


# ============================================
# TERMINAL UTILITIES
# ============================================


def get_terminal_width() -> int:
    """
    Get the current terminal width with bounds.

    Returns:
        Terminal width (40-120 chars)
    """
    try:
        width = shutil.get_terminal_size().columns
        return max(40, min(width, Config.TERMINAL_MAX_WIDTH))
    except (OSError, ValueError):
        return 80


# ============================================
# BANNER & HEADERS
# ============================================


def show_banner():
    """Display the welcome banner, centered when the terminal is wide enough."""
    width = 38
    terminal_width = get_terminal_width()
    rule = ("=" * width).center(terminal_width)
    title = "Welcome to the Event Scheduler!".center(width).center(terminal_width)
    version_line = f"v{Config.VERSION}".center(terminal_width)

    print(f"{Colors.BORDER}{rule}{Colors.RESET}")
    print(f"{Colors.HEADER}{title}{Colors.RESET}")
    print(f"{Colors.BORDER}{rule}{Colors.RESET}")
    print(f"{Colors.MUTED}{version_line}{Colors.RESET}")


def show_section_header(title: str):
    """
    Display section header.

    Args:
        title: Section title text
    """
    print(f"\n{Colors.HEADER}{title}{Colors.RESET}")


def show_menu():
    """Display the numbered main menu."""
    show_section_header("Event Scheduler Menu")
    for number, label in enumerate(Config.MENU_OPTIONS, start=1):
        print(f"{Colors.PRIMARY}{number}.{Colors.RESET} {label}")


# ============================================
# USER PROMPTS
# ============================================


def wait_for_enter():
    """Block until the user presses Enter."""
    input(f"{Colors.MUTED}Press Enter to continue...{Colors.RESET}")


def prompt_line(prompt_text: str) -> str:
    """
    Prompt for a whole line of free text.

    The line is returned as typed, surrounding spaces included.
    """
    return input(f"{Colors.PROMPT}{prompt_text}{Colors.RESET} ")


def prompt_token(prompt_text: str) -> str:
    """
    Prompt for a single word.

    Returns:
        First whitespace-delimited token of the line, or "" for a blank line
    """
    parts = prompt_line(prompt_text).split()
    return parts[0] if parts else ""


def prompt_choice() -> Optional[int]:
    """
    Prompt for a menu number.

    Returns:
        The number entered, or None if the input is not a whole number
    """
    raw = prompt_token("Enter your choice:")
    try:
        return int(raw)
    except ValueError:
        return None


# ============================================
# STATUS MESSAGES
# ============================================


def show_success(message: str):
    """Display success message with icon."""
    print(f"{Colors.SUCCESS}✓ {message}{Colors.RESET}")


def show_error(message: str):
    """Display error message with icon."""
    print(f"{Colors.ERROR}✗ {message}{Colors.RESET}")


def show_warning(message: str):
    """Display warning message with icon."""
    print(f"{Colors.WARNING}⚠ {message}{Colors.RESET}")


def show_info(message: str):
    """Display info message with icon."""
    print(f"{Colors.INFO}ℹ {message}{Colors.RESET}")


# ============================================
# EVENT DISPLAYS
# ============================================


def display_event_lines(events: List[Event]):
    """Print one "<date> <time> - <title>" line per event."""
    for line in EventFormatter.format_lines(events):
        print(f"{Colors.TITLE}{line}{Colors.RESET}")


def display_event_list(events: List[Event]):
    """
    Display the full schedule.

    Args:
        events: Events in display order
    """
    if not events:
        show_info("No events scheduled.")
        return

    show_section_header("Scheduled Events:")
    display_event_lines(events)


def display_search_results(query: str, matches: List[Event]):
    """
    Display events matching a title search.

    Args:
        query: Substring that was searched for
        matches: Matching events in display order
    """
    if not matches:
        show_warning(f'No events matching "{query}" were found.')
        return

    display_event_lines(matches)


def show_total(count: int):
    """Display the number of scheduled events."""
    print(f"{Colors.INFO}Total events scheduled: {count}{Colors.RESET}")


def show_goodbye():
    print(f"{Colors.ACCENT}Thank you for using the Event Scheduler! Goodbye!{Colors.RESET}")
