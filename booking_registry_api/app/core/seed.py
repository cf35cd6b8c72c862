"""Demo bookings loaded into a fresh store at startup."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from booking_registry_api.app.core.store import BookingStore
from booking_registry_api.app.schemas.booking import Booking

logger = logging.getLogger(__name__)

SEED_BOOKINGS: List[Dict[str, Any]] = [
    {
        "name": "Asha Patel",
        "email": "asha@example.com",
        "phone": "9876543210",
        "organization": "Synergia College",
        "tickets": 2,
        "notes": None,
    },
    {
        "name": "Ravi Kumar",
        "email": "ravi.kumar@example.com",
        "phone": None,
        "organization": None,
        "tickets": 1,
        "notes": "Vegetarian",
    },
]


def seed_store(store: BookingStore) -> List[Booking]:
    """Append the demo bookings to ``store`` and return them.

    Seed records draw their ids from the store's counter, so they take
    ids 1 and 2 on an empty store.
    """
    created: List[Booking] = []
    for data in SEED_BOOKINGS:
        booking = Booking(
            id=store.allocate_id(),
            created_at=datetime.now(timezone.utc),
            **data,
        )
        created.append(store.add(booking))
    logger.info("Seeded %s bookings", len(created))
    return created
