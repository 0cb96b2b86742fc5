import logging
from typing import List, Optional

from event_scheduler.config import Config
from event_scheduler.core.store import EventStore
from event_scheduler.data import storage
from event_scheduler.exceptions import StorageError
from event_scheduler.ui import commands, parser, views


def setup_logging(verbose: bool = False):
    """
    Configure logging to file within application storage directory.

    Creates log file in ~/.event_scheduler/event_scheduler.log with timestamps.
    """
    logging.basicConfig(
        filename=storage.get_log_file_path(),
        level=logging.DEBUG if verbose else logging.INFO,
        format=Config.LOG_FORMAT,
        datefmt=Config.LOG_DATE_FORMAT,
    )


def save_events(store: EventStore, path: Optional[str]):
    """Rewrite the events file, reporting failures without stopping the menu."""
    try:
        storage.save(store.events, path)
    except StorageError as e:
        views.show_error(str(e))


def run_menu(store: EventStore, path: Optional[str] = None):
    """
    Run the numbered menu until the user chooses Exit.

    Add, Edit and Delete are each followed by a full save; the other
    options only read the store.

    Args:
        store: Event store for this session
        path: Events file to save to (None for the configured default)
    """
    while True:
        views.show_menu()

        try:
            choice = views.prompt_choice()
        except (KeyboardInterrupt, EOFError):
            print()
            logging.info("Input closed at menu prompt")
            break

        if choice == Config.EXIT_CHOICE:
            break

        if choice not in commands.COMMANDS:
            logging.debug(f"Invalid menu choice: {choice}")
            views.show_error("Invalid choice. Please try again.")
            continue

        try:
            mutated = commands.run_command(choice, store)
        except EOFError:
            print()
            logging.info("Input closed during command")
            break

        if mutated:
            save_events(store, path)

    views.show_goodbye()


def start_application(argv: Optional[List[str]] = None) -> int:
    """
    Main application entry point.

    Flow:
    1. Parse command line options
    2. Setup logging
    3. Load events from the events file
    4. Welcome banner, then menu loop until Exit

    Returns:
        Process exit status (1 only if the events file cannot be read)
    """
    args = parser.initialize_parser().parse_args(argv)

    setup_logging(args.verbose)
    logging.info("Application starting")

    events_path = storage.get_events_file_path(args.file)

    try:
        store = EventStore(storage.load(events_path))
    except StorageError as e:
        # An unreadable file is never overwritten
        views.show_error(str(e))
        logging.info("Application shutdown")
        return 1

    views.show_banner()
    if Config.PAUSE_ON_START:
        try:
            views.wait_for_enter()
        except (KeyboardInterrupt, EOFError):
            print()

    try:
        run_menu(store, events_path)
    finally:
        logging.info("Application shutdown")

    return 0
