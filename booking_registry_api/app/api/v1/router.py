"""
Top-level router for the booking API.

Domain routers are aggregated here and mounted by ``main.create_app``
under the ``/api`` prefix.
"""

from fastapi import APIRouter

from .endpoints import bookings

router = APIRouter()

router.include_router(bookings.router, tags=["bookings"])
