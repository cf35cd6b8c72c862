"""
Booking endpoints.

These routes expose the CRUD surface of the registry: list every
booking, create one, and read, update or cancel a single booking by
id.  Errors raised by the service (validation failures, unknown or
unparsable ids) are turned into JSON responses by the exception
handlers installed in ``main.create_app``.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from booking_registry_api.app.api.dependencies import (
    booking_id_param,
    get_booking_service,
    read_json_payload,
)
from booking_registry_api.app.schemas.booking import (
    Booking,
    BookingEnvelope,
    ErrorResponse,
    ValidationErrorResponse,
)
from booking_registry_api.app.services.booking_service import BookingId, BookingService

router = APIRouter()

_INVALID_ID = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.get("/bookings", response_model=List[Booking])
async def list_bookings(
    service: BookingService = Depends(get_booking_service),
) -> List[Booking]:
    """Return all bookings in the order they were created."""
    return service.list_bookings()


@router.post(
    "/bookings",
    response_model=BookingEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse}},
)
async def create_booking(
    payload: Dict[str, Any] = Depends(read_json_payload),
    service: BookingService = Depends(get_booking_service),
) -> BookingEnvelope:
    """Create a booking.

    ``name`` and ``email`` are required; ``tickets`` defaults to 1.
    """
    return service.create_booking(payload)


@router.get(
    "/bookings/{booking_id}",
    response_model=Booking,
    responses={**_INVALID_ID, **_NOT_FOUND},
)
async def get_booking(
    booking_id: BookingId = Depends(booking_id_param),
    service: BookingService = Depends(get_booking_service),
) -> Booking:
    return service.get_booking(booking_id)


@router.put(
    "/bookings/{booking_id}",
    response_model=BookingEnvelope,
    responses={**_INVALID_ID, **_NOT_FOUND},
)
async def update_booking(
    payload: Dict[str, Any] = Depends(read_json_payload),
    booking_id: BookingId = Depends(booking_id_param),
    service: BookingService = Depends(get_booking_service),
) -> BookingEnvelope:
    """Modify an existing booking.

    Only ``name``, ``email``, ``phone``, ``organization``, ``tickets``
    and ``notes`` can change, and only when present in the body.
    """
    return service.update_booking(booking_id, payload)


@router.delete(
    "/bookings/{booking_id}",
    response_model=BookingEnvelope,
    responses={**_INVALID_ID, **_NOT_FOUND},
)
async def cancel_booking(
    booking_id: BookingId = Depends(booking_id_param),
    service: BookingService = Depends(get_booking_service),
) -> BookingEnvelope:
    """Cancel a booking and return the removed record."""
    return service.cancel_booking(booking_id)
