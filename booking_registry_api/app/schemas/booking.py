"""
Pydantic models for bookings.

``Booking`` is the record held by the in-memory store and returned to
clients.  Fields use snake_case in Python and camelCase on the wire
(``createdAt``/``updatedAt``).  ``name``, ``email`` and the optional
text fields are stored verbatim as supplied by the client, so their
types are deliberately loose; the rules that do apply live in
``services.booking_service.validate_booking_payload``.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer


class Booking(BaseModel):
    id: int = Field(..., ge=1, examples=[1])
    name: Any = Field(..., examples=["Asha Patel"])
    email: Any = Field(..., examples=["asha@example.com"])
    phone: Any = None
    organization: Any = None
    tickets: int = Field(1, ge=1, examples=[1])
    notes: Any = None
    created_at: datetime = Field(..., alias="createdAt")
    # Only present once the booking has been updated at least once.
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)

    @model_serializer(mode="wrap")
    def _omit_missing_update_stamp(self, handler):
        data = handler(self)
        if self.updated_at is None:
            data.pop("updatedAt", None)
            data.pop("updated_at", None)
        return data


class BookingEnvelope(BaseModel):
    """Response body of the mutating endpoints."""

    message: str = Field(..., examples=["Booking created"])
    booking: Booking


class ErrorResponse(BaseModel):
    error: str


class ValidationErrorResponse(BaseModel):
    errors: List[str]


class ValidationResult(BaseModel):
    """Outcome of validating a booking payload.

    An empty ``errors`` list means the payload is acceptable.
    """

    errors: List[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
