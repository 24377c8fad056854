"""
Domain exceptions raised by the record services.
"""


class OrganiksError(Exception):
    """Base class for errors raised by the record core."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(OrganiksError):
    """A record, or any record matching a filter, does not exist.

    Also raised by list operations on an empty store.
    """


class IdExhaustedError(OrganiksError):
    """The shared id counter cannot be incremented any further."""
