"""
Error taxonomy for the booking registry.

Every error a client can provoke is a subclass of
``BookingRegistryError`` and carries the HTTP status code it maps to.
The exception handlers registered in ``main.create_app`` turn them
into JSON responses; none of them are retried.
"""

from typing import Any, Dict, List


class BookingRegistryError(Exception):
    """Base class for errors reported back to the caller."""

    status_code: int = 400
    message: str = "Bad request"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message}


class MalformedRequestBody(BookingRegistryError):
    """The request body could not be parsed as JSON."""

    message = "Invalid JSON body. Check syntax."


class ValidationError(BookingRegistryError):
    """A payload broke one or more field rules.

    The full list of messages is always reported, never just the
    first one.
    """

    message = "Validation failed"

    def __init__(self, errors: List[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))

    def to_body(self) -> Dict[str, Any]:
        return {"errors": self.errors}


class InvalidIdError(BookingRegistryError):
    """The booking identifier in the path is not a finite number."""

    message = "Invalid id"


class NotFoundError(BookingRegistryError):
    """No booking with the requested identifier exists."""

    status_code = 404
    message = "Booking not found"
