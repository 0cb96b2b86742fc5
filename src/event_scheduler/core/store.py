"""In-memory event collection kept sorted by date and time."""

import logging
from typing import Iterable, Iterator, List, Optional

from event_scheduler.core.event import Event, sort_events
from event_scheduler.exceptions import EventNotFoundError, InvalidEventError
from event_scheduler.utils.validators import InputValidator


class EventStore:
    """
    Owns the events for the lifetime of the session.

    Every mutation leaves the collection sorted by (date, time). Titles are
    not unique: lookups and edits act on the first match in sorted order,
    while removal drops every match.
    """

    def __init__(self, events: Iterable[Event] = ()):
        self._events: List[Event] = sort_events(events)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(list(self._events))

    @property
    def events(self) -> List[Event]:
        """Snapshot of the events in current order."""
        return list(self._events)

    def count(self) -> int:
        return len(self._events)

    def _resort(self):
        self._events = sort_events(self._events)

    # --- Mutations ---

    def add(self, event: Event) -> Event:
        """Append an event and restore (date, time) order."""
        self._events.append(event)
        self._resort()
        logging.info(f"Event added: '{event.title}' on {event.date} {event.time}")
        return event

    def create(self, title: str, date: str, time: str) -> Event:
        """
        Build and add an event, rejecting malformed date or time.

        Raises:
            InvalidEventError: If date or time has the wrong shape
        """
        if not InputValidator.validate_date(date):
            raise InvalidEventError(f"Invalid date '{date}' (expected YYYY-MM-DD)")
        if not InputValidator.validate_time(time):
            raise InvalidEventError(f"Invalid time '{time}' (expected HH:MM)")
        return self.add(Event(title, date, time))

    def update(
        self,
        event: Event,
        new_title: str = "",
        new_date: str = "",
        new_time: str = "",
    ) -> Event:
        """
        Apply field overrides to an event held by this store.

        Empty overrides keep the current value. A date or time override
        that fails validation is dropped and the old value is kept.
        """
        if new_title:
            event.title = new_title
        if new_date and InputValidator.validate_date(new_date):
            event.date = new_date
        elif new_date:
            logging.debug(f"Ignoring invalid date override '{new_date}'")
        if new_time and InputValidator.validate_time(new_time):
            event.time = new_time
        elif new_time:
            logging.debug(f"Ignoring invalid time override '{new_time}'")

        self._resort()
        logging.info(f"Event updated: '{event.title}' on {event.date} {event.time}")
        return event

    def remove_all_by_title_exact(self, title: str) -> int:
        """Remove every event with exactly this title and return how many went."""
        kept = [event for event in self._events if event.title != title]
        removed = len(self._events) - len(kept)
        self._events = kept
        if removed:
            logging.info(f"Removed {removed} event(s) titled '{title}'")
        return removed

    # --- Queries ---

    def find_by_title_exact(self, title: str) -> Optional[Event]:
        """First event in sorted order whose title equals `title`, or None."""
        for event in self._events:
            if event.title == title:
                return event
        return None

    def get(self, title: str) -> Event:
        """
        Like find_by_title_exact, but raising when nothing matches.

        Raises:
            EventNotFoundError: If no event has this title
        """
        event = self.find_by_title_exact(title)
        if event is None:
            raise EventNotFoundError(f"No event titled '{title}'")
        return event

    def search_by_title_substring(self, query: str) -> List[Event]:
        """Case-sensitive substring match on titles, in current order."""
        return [event for event in self._events if query in event.title]
