"""Custom exceptions for application."""

import logging


class CoreException(Exception):
    """Base exception that logs errors."""

    def __init__(self, message: str):
        self.message = message
        logging.error(f"{self.__class__.__name__}: {message}")
        super().__init__(self.message)


class EventNotFoundError(CoreException):
    """No event with the given title."""

    pass


class InvalidEventError(CoreException):
    """Event field has the wrong shape."""

    pass


class StorageError(CoreException):
    """Events file could not be read or written."""

    pass
