import pytest

from event_scheduler.config import Config
from event_scheduler.core.event import Event
from event_scheduler.core.store import EventStore


@pytest.fixture(autouse=True)
def isolated_storage(tmp_path, monkeypatch):
    """Keep log files and the default events file out of the real home and cwd."""
    storage_dir = tmp_path / "home"
    monkeypatch.setattr(Config, "STORAGE_HOME", str(storage_dir))
    monkeypatch.chdir(tmp_path)
    yield storage_dir


@pytest.fixture
def events_file(tmp_path):
    """Path to a not-yet-existing events file."""
    return str(tmp_path / "events.txt")


@pytest.fixture
def sample_events():
    return [
        Event("Dinner", "2024-03-01", "19:00"),
        Event("Lunch", "2024-03-01", "12:00"),
        Event("Brunch", "2024-02-25", "11:00"),
    ]


@pytest.fixture
def store(sample_events):
    """Store holding Brunch, Lunch, Dinner (in sorted order)."""
    return EventStore(sample_events)
