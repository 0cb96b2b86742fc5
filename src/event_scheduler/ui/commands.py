"""Command handlers for each menu option."""

import logging

from event_scheduler.config import Config
from event_scheduler.core.store import EventStore
from event_scheduler.exceptions import CoreException
from event_scheduler.ui import views
from event_scheduler.utils.validators import InputValidator


# ============================================
# INPUT HELPERS
# ============================================


def prompt_valid_date(prompt_text: str) -> str:
    """Re-prompt until the entered date has the YYYY-MM-DD shape."""
    while True:
        date = views.prompt_token(prompt_text)
        if InputValidator.validate_date(date):
            return date


def prompt_valid_time(prompt_text: str) -> str:
    """Re-prompt until the entered time has the HH:MM shape."""
    while True:
        time = views.prompt_token(prompt_text)
        if InputValidator.validate_time(time):
            return time


# ============================================
# COMMAND HANDLERS
# ============================================


def add_command(store: EventStore):
    """
    Add a new event.

    Prompts for:
    - Title (whole line)
    - Date, repeated until it has the YYYY-MM-DD shape
    - Time, repeated until it has the HH:MM shape

    Args:
        store: Event store for this session
    """
    title = views.prompt_line("Enter event title:")
    date = prompt_valid_date(f"Enter event date ({Config.DATE_FORMAT_HINT}):")
    time = prompt_valid_time(f"Enter event time ({Config.TIME_FORMAT_HINT}):")

    store.create(title, date, time)
    views.show_success("Event added successfully!")


def view_command(store: EventStore):
    """Display every event in date and time order."""
    views.display_event_list(store.events)


def edit_command(store: EventStore):
    """
    Edit the first event with the given title.

    Each field keeps its value when left blank. A date or time that
    does not have the right shape is ignored rather than re-prompted.

    Args:
        store: Event store for this session
    """
    title = views.prompt_line("Enter the title of the event to edit:")
    event = store.find_by_title_exact(title)

    if event is None:
        logging.info(f"Edit requested for unknown event '{title}'")
        views.show_error("Event not found.")
        return

    views.show_info(f"Editing Event: {event.title}")
    new_title = views.prompt_line("Enter new title (or press Enter to keep unchanged):")
    new_date = views.prompt_line(
        f"Enter new date ({Config.DATE_FORMAT_HINT}, or press Enter to keep unchanged):"
    )
    new_time = views.prompt_line(
        f"Enter new time ({Config.TIME_FORMAT_HINT}, or press Enter to keep unchanged):"
    )

    store.update(event, new_title, new_date, new_time)
    views.show_success("Event updated successfully!")


def delete_command(store: EventStore):
    """
    Delete every event with the given title.

    Args:
        store: Event store for this session
    """
    title = views.prompt_line("Enter the title of the event to delete:")
    removed = store.remove_all_by_title_exact(title)

    if removed:
        views.show_success("Event deleted successfully!")
    else:
        logging.info(f"Delete requested for unknown event '{title}'")
        views.show_error("Event not found.")


def search_command(store: EventStore):
    """Show events whose title contains the entered text (case-sensitive)."""
    query = views.prompt_line("Enter the title of the event to search:")
    views.display_search_results(query, store.search_by_title_substring(query))


def count_command(store: EventStore):
    views.show_total(store.count())


# ============================================
# DISPATCH
# ============================================

# Menu number -> (handler, mutates store)
COMMANDS = {
    1: (add_command, True),
    2: (view_command, False),
    3: (edit_command, True),
    4: (delete_command, True),
    5: (search_command, False),
    6: (count_command, False),
}


def run_command(choice: int, store: EventStore) -> bool:
    """
    Run the handler for a menu choice.

    Args:
        choice: Menu number (1-6)
        store: Event store for this session

    Returns:
        True if the handler may have changed the store and it should be saved
    """
    handler, mutates = COMMANDS[choice]
    try:
        handler(store)
    except CoreException as e:
        views.show_error(str(e))
    except KeyboardInterrupt:
        print()
        views.show_warning("Operation cancelled.")
        logging.info(f"{handler.__name__} cancelled by user")
    return mutates
