import os

import pytest

from event_scheduler.config import Config
from event_scheduler.core.event import Event
from event_scheduler.data import storage
from event_scheduler.exceptions import StorageError


class TestStoragePaths:
    """Test path helpers."""

    def test_storage_directory_created(self, isolated_storage):
        storage_dir = storage.get_storage_directory()
        assert os.path.isdir(storage_dir)
        assert storage_dir == str(isolated_storage)

    def test_default_events_path_in_cwd(self):
        assert storage.get_events_file_path() == os.path.join(os.getcwd(), "events.txt")

    def test_explicit_path_wins(self, events_file):
        assert storage.get_events_file_path(events_file) == events_file

    def test_log_file_inside_storage(self, isolated_storage):
        assert storage.get_log_file_path() == os.path.join(
            str(isolated_storage), Config.LOG_FILE
        )


class TestLoad:
    """Test reading the events file."""

    def test_missing_file_is_empty(self, events_file):
        assert not storage.events_file_exists(events_file)
        assert storage.load(events_file) == []

    def test_load_groups_lines_in_threes(self, events_file):
        with open(events_file, "w") as f:
            f.write("Lunch\n2024-03-01\n12:00\nStandup\n2024-03-01\n09:00\n")

        events = storage.load(events_file)
        assert [e.as_tuple() for e in events] == [
            ("Standup", "2024-03-01", "09:00"),
            ("Lunch", "2024-03-01", "12:00"),
        ]

    def test_load_keeps_whitespace_in_titles(self, events_file):
        with open(events_file, "w") as f:
            f.write("  Team sync  \n2024-03-01\n12:00\n")

        assert storage.load(events_file)[0].title == "  Team sync  "

    def test_load_without_trailing_newline(self, events_file):
        with open(events_file, "w") as f:
            f.write("Lunch\n2024-03-01\n12:00")

        assert storage.load(events_file)[0].as_tuple() == ("Lunch", "2024-03-01", "12:00")

    def test_partial_record_padded(self, events_file):
        """A file ending mid-record keeps the partial event with empty fields."""
        with open(events_file, "w") as f:
            f.write("Lunch\n2024-03-01\n12:00\nDangling\n2024-04-01\n")

        events = storage.load(events_file)
        assert len(events) == 2
        assert ("Dangling", "2024-04-01", "") in [e.as_tuple() for e in events]

    def test_default_path_used(self, tmp_path):
        (tmp_path / "events.txt").write_text("Lunch\n2024-03-01\n12:00\n")
        assert len(storage.load()) == 1

    def test_unreadable_file_raises(self, tmp_path):
        """A directory where the file should be is a storage error."""
        path = tmp_path / "events_dir"
        path.mkdir()
        with pytest.raises(StorageError):
            storage.load(str(path))


class TestSave:
    """Test writing the events file."""

    def test_save_writes_three_lines_per_event(self, events_file):
        storage.save([Event("Standup", "2024-03-01", "09:00")], events_file)

        with open(events_file) as f:
            assert f.read() == "Standup\n2024-03-01\n09:00\n"

    def test_save_empty_truncates(self, events_file):
        storage.save([Event("Standup", "2024-03-01", "09:00")], events_file)
        storage.save([], events_file)

        assert os.path.getsize(events_file) == 0
        assert storage.load(events_file) == []

    def test_round_trip_normalizes_order(self, events_file, sample_events):
        """Save then load gives back the same triples, sorted by date and time."""
        storage.save(sample_events, events_file)
        loaded = storage.load(events_file)

        assert sorted(e.as_tuple() for e in loaded) == sorted(
            e.as_tuple() for e in sample_events
        )
        assert [e.title for e in loaded] == ["Brunch", "Lunch", "Dinner"]

    def test_save_to_directory_raises(self, tmp_path):
        with pytest.raises(StorageError):
            storage.save([], str(tmp_path))
