"""
FastAPI dependencies shared by the booking endpoints.

``get_booking_service`` hands each request a service bound to the
store owned by the running application.  ``read_json_payload`` decodes
the request body itself so that malformed JSON is reported with the
registry's own error body instead of the framework's 422 response, and
``booking_id_param`` parses the ``{booking_id}`` path segment.
"""

import json
import logging
from typing import Any, Dict

from fastapi import Depends, Path, Request

from booking_registry_api.app.core.errors import MalformedRequestBody, ValidationError
from booking_registry_api.app.core.store import BookingStore
from booking_registry_api.app.services.booking_service import (
    BookingId,
    BookingService,
    parse_booking_id,
)

logger = logging.getLogger(__name__)


def get_store(request: Request) -> BookingStore:
    return request.app.state.store


def get_booking_service(store: BookingStore = Depends(get_store)) -> BookingService:
    return BookingService(store)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


async def read_json_payload(request: Request) -> Dict[str, Any]:
    """Decode the request body as a JSON object.

    An empty body counts as ``{}``.  Anything that is not valid JSON,
    including ``NaN``/``Infinity`` literals, integers too long to
    convert and a top-level value that is neither an object nor an
    array, raises ``MalformedRequestBody``.  A JSON array raises
    ``ValidationError``.
    """
    body = await request.body()
    if not body.strip():
        return {}
    try:
        payload = json.loads(body, parse_constant=_reject_constant)
    except ValueError as exc:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
        logger.debug("Rejecting malformed JSON body: %s", exc)
        raise MalformedRequestBody() from exc
    if isinstance(payload, list):
        raise ValidationError(["request body must be a JSON object"])
    if not isinstance(payload, dict):
        raise MalformedRequestBody()
    return payload


def booking_id_param(
    booking_id: str = Path(..., description="ID of the booking"),
) -> BookingId:
    return parse_booking_id(booking_id)
