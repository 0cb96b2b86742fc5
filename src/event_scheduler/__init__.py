"""Console event scheduler with flat-file persistence."""

from event_scheduler.config import Config

__version__ = Config.VERSION
