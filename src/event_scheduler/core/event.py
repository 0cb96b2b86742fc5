"""Event record and its ordering."""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class Event:
    """One scheduled item. The title doubles as its lookup key."""

    title: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM

    def sort_key(self) -> Tuple[str, str]:
        """Plain string ordering on (date, time); not calendar-aware."""
        return (self.date, self.time)

    def as_tuple(self) -> Tuple[str, str, str]:
        return (self.title, self.date, self.time)


def sort_events(events) -> list:
    """Return events ordered by (date, time), keeping insertion order on ties."""
    return sorted(events, key=Event.sort_key)
