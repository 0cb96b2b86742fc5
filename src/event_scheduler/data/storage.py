"""Handles reading and writing the flat events file."""

import logging
import os
from typing import Iterable, List, Optional

from event_scheduler.config import Config
from event_scheduler.core.event import Event, sort_events
from event_scheduler.exceptions import StorageError

# --- Path Management ---


def get_storage_directory():
    """Ensures and returns the application's storage directory path."""
    storage_dir = Config.STORAGE_HOME
    os.makedirs(storage_dir, exist_ok=True)
    return storage_dir


def get_log_file_path():
    """Returns the path to the activity log."""
    return os.path.join(get_storage_directory(), Config.LOG_FILE)


def get_events_file_path(path: Optional[str] = None):
    """Returns the events file path, defaulting to the configured one."""
    return path if path else Config.get_events_path()


def events_file_exists(path: Optional[str] = None):
    """Checks whether there is anything to load yet."""
    return os.path.exists(get_events_file_path(path))


# --- Serialization ---


def parse_records(lines: List[str]) -> List[Event]:
    """
    Groups lines into (title, date, time) triples.

    A trailing partial record is kept with its missing fields empty.
    """
    events = []
    step = Config.LINES_PER_RECORD

    for start in range(0, len(lines), step):
        fields = lines[start : start + step]
        if len(fields) < step:
            logging.warning(
                f"Events file ends mid-record ({len(fields)} of {step} lines); "
                "missing fields left empty"
            )
            fields = fields + [""] * (step - len(fields))
        events.append(Event(*fields))

    return events


def serialize_records(events: Iterable[Event]) -> str:
    """Three newline-terminated lines per event, no escaping."""
    return "".join(f"{e.title}\n{e.date}\n{e.time}\n" for e in events)


# --- Load & Save ---


def load(path: Optional[str] = None) -> List[Event]:
    """
    Reads every event from the events file, sorted by date and time.

    A missing file is a first run, not an error.

    Raises:
        StorageError: If the file exists but cannot be read
    """
    file_path = get_events_file_path(path)

    if not os.path.exists(file_path):
        logging.info(f"No events file at {file_path}; starting empty")
        return []

    try:
        with open(file_path, "r", encoding=Config.FILE_ENCODING, newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError(f"Could not read events file '{file_path}': {e}")

    # Only "\n" ends a line; a final terminator does not start a new one
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    events = sort_events(parse_records(lines))
    logging.info(f"Loaded {len(events)} events from {file_path}")
    return events


def save(events: Iterable[Event], path: Optional[str] = None):
    """
    Overwrites the events file with the given events in their current order.

    Raises:
        StorageError: If the file cannot be written
    """
    file_path = get_events_file_path(path)
    events = list(events)

    try:
        with open(file_path, "w", encoding=Config.FILE_ENCODING, newline="") as f:
            f.write(serialize_records(events))
    except OSError as e:
        raise StorageError(f"Could not write events file '{file_path}': {e}")

    logging.info(f"Saved {len(events)} events to {file_path}")
