"""Reusable formatting utilities."""

from typing import Iterable, List

from event_scheduler.core.event import Event


class EventFormatter:
    """Plain-text rendering of events, shared by the list and search views."""

    @staticmethod
    def format_line(event: Event) -> str:
        """Render as "<date> <time> - <title>"."""
        return f"{event.date} {event.time} - {event.title}"

    @staticmethod
    def format_lines(events: Iterable[Event]) -> List[str]:
        return [EventFormatter.format_line(e) for e in events]
