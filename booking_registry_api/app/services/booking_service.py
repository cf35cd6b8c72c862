"""
Business logic for the booking registry.

The ``BookingService`` implements listing, creating, reading, updating
and cancelling bookings on top of a ``BookingStore``.  Incoming
payloads are plain JSON objects; ``validate_booking_payload`` checks
them before anything touches the store, and only a fixed allow-list of
fields is ever copied onto a record.

All methods are synchronous and never yield to the event loop, so a
request handler always sees the store in a consistent state.
"""

import logging
import math
import re
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Union

from booking_registry_api.app.core.errors import (
    InvalidIdError,
    NotFoundError,
    ValidationError,
)
from booking_registry_api.app.core.store import BookingStore
from booking_registry_api.app.schemas.booking import (
    Booking,
    BookingEnvelope,
    ValidationResult,
)

logger = logging.getLogger(__name__)

# A structural check only: something@something.something, no spaces
# and a single ``@``.
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# Fields an update is allowed to overwrite.  Anything else in a PUT
# payload (``id``, ``createdAt``...) is ignored.
UPDATABLE_FIELDS = ("name", "email", "phone", "organization", "tickets", "notes")

_DECIMAL_ID = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_RADIX_ID = re.compile(r"0[xX][0-9a-fA-F]+|0[bB][01]+|0[oO][0-7]+")

BookingId = Union[int, float]


def _is_positive_integer(value: Any) -> bool:
    # bool is a subclass of int but ``true`` is not a ticket count.
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value > 0
    if isinstance(value, float):
        return value.is_integer() and value > 0
    return False


def validate_booking_payload(payload: Mapping[str, Any], for_create: bool = True) -> ValidationResult:
    """Check a booking payload and collect every rule it breaks.

    In create mode ``name`` and ``email`` are mandatory.  In both modes
    a text ``email`` must look like ``local@domain.tld`` and
    ``tickets``, when present, must be a positive integer.  Fields the
    rules do not mention are not inspected.
    """
    errors: List[str] = []
    if for_create and not payload.get("name"):
        errors.append("name is required")
    if for_create and not payload.get("email"):
        errors.append("email is required")
    email = payload.get("email")
    if "email" in payload and isinstance(email, str):
        if not EMAIL_PATTERN.fullmatch(email):
            errors.append("email is not valid")
    if "tickets" in payload and not _is_positive_integer(payload["tickets"]):
        errors.append("tickets must be a positive integer")
    return ValidationResult(errors=errors)


def parse_booking_id(raw: str) -> BookingId:
    """Turn a path segment into a booking identifier.

    Accepts a signed decimal with optional fraction and exponent, or an unsigned
    ``0x``/``0b``/``0o`` literal, with surrounding whitespace.  Digit
    separators (``1_0``) are not numbers.  A blank segment is 0.  Any
    finite number is accepted; integral values are normalised to
    ``int``.  A fractional id is valid input but will simply never
    match a booking.
    """
    text = (raw or "").strip()
    if not text:
        return 0
    if _RADIX_ID.fullmatch(text):
        value = int(text, 0)
        if value > sys.float_info.max:
            raise InvalidIdError()
        return value
    if not _DECIMAL_ID.fullmatch(text):
        raise InvalidIdError()
    number = float(text)
    if not math.isfinite(number):
        raise InvalidIdError()
    return int(number) if number.is_integer() else number


def _now() -> datetime:
    return datetime.now(timezone.utc)


class BookingService:
    """Service for managing bookings held in a ``BookingStore``."""

    def __init__(self, store: BookingStore) -> None:
        self.store = store

    def list_bookings(self) -> List[Booking]:
        """Return every booking in creation order."""
        return self.store.all()

    def create_booking(self, payload: Mapping[str, Any]) -> BookingEnvelope:
        """Validate ``payload`` and append a new booking.

        ``phone``, ``organization`` and ``notes`` become ``None`` when
        missing or empty; ``tickets`` defaults to 1.  Raises
        ``ValidationError`` with the full list of problems otherwise.
        """
        result = validate_booking_payload(payload, for_create=True)
        if not result.ok:
            raise ValidationError(result.errors)

        tickets = payload.get("tickets")
        booking = Booking(
            id=self.store.allocate_id(),
            name=payload["name"],
            email=payload["email"],
            phone=payload.get("phone") or None,
            organization=payload.get("organization") or None,
            tickets=int(tickets) if tickets else 1,
            notes=payload.get("notes") or None,
            created_at=_now(),
        )
        self.store.add(booking)
        logger.info("Created booking %s for %s", booking.id, booking.email)
        return BookingEnvelope(message="Booking created", booking=booking)

    def get_booking(self, booking_id: BookingId) -> Booking:
        """Return the booking with ``booking_id`` or raise ``NotFoundError``."""
        booking = self.store.get(booking_id)
        if booking is None:
            raise NotFoundError()
        return booking

    def update_booking(self, booking_id: BookingId, payload: Mapping[str, Any]) -> BookingEnvelope:
        """Overwrite the allow-listed fields present in ``payload``.

        The booking is looked up before the payload is validated, so an
        unknown id is reported as not found whatever the payload holds.
        Explicit ``None`` values clear a field.  ``updatedAt`` is
        stamped on every call, even when nothing changed.
        """
        booking = self.get_booking(booking_id)

        result = validate_booking_payload(payload, for_create=False)
        if not result.ok:
            raise ValidationError(result.errors)

        changes: Dict[str, Any] = {}
        for field in UPDATABLE_FIELDS:
            if field in payload:
                value = payload[field]
                changes[field] = int(value) if field == "tickets" else value
        for field, value in changes.items():
            setattr(booking, field, value)
        booking.updated_at = _now()
        logger.info("Updated booking %s (%s)", booking.id, ", ".join(changes) or "no fields")
        return BookingEnvelope(message="Booking updated", booking=booking)

    def cancel_booking(self, booking_id: BookingId) -> BookingEnvelope:
        """Remove a booking and return it as confirmation."""
        booking = self.store.remove(booking_id)
        if booking is None:
            raise NotFoundError()
        logger.info("Cancelled booking %s", booking.id)
        return BookingEnvelope(message="Booking cancelled", booking=booking)
