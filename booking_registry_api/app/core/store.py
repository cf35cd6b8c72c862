"""
In-memory booking store.

``BookingStore`` owns the ordered collection of bookings and the id
counter.  One store belongs to one application instance (it lives on
``app.state.store``), so every ``create_app`` call and every test gets
a fresh registry.  Iteration order is insertion order, which is the
order bookings were created in; updates mutate records in place and
never reorder them.
"""

from typing import Dict, Iterator, List, Optional, Union

from booking_registry_api.app.schemas.booking import Booking


class BookingStore:
    """Ordered map of bookings keyed by id, plus the next-id counter."""

    def __init__(self) -> None:
        self._bookings: Dict[int, Booking] = {}
        self._next_id = 1

    def allocate_id(self) -> int:
        """Return the next booking id.

        Ids start at 1 and are never handed out twice, even after the
        booking that held one has been cancelled.
        """
        booking_id = self._next_id
        self._next_id += 1
        return booking_id

    def add(self, booking: Booking) -> Booking:
        if booking.id in self._bookings:
            raise ValueError(f"Booking {booking.id} already exists")
        self._bookings[booking.id] = booking
        return booking

    def get(self, booking_id: Union[int, float]) -> Optional[Booking]:
        return self._bookings.get(booking_id)

    def remove(self, booking_id: Union[int, float]) -> Optional[Booking]:
        return self._bookings.pop(booking_id, None)

    def all(self) -> List[Booking]:
        return list(self._bookings.values())

    def __iter__(self) -> Iterator[Booking]:
        return iter(self._bookings.values())

    def __len__(self) -> int:
        return len(self._bookings)

    def __contains__(self, booking_id: object) -> bool:
        return booking_id in self._bookings
