"""Application entry point."""

from event_scheduler.main import main

if __name__ == "__main__":
    main()
