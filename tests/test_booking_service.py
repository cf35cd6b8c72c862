"""Unit tests for ``BookingService`` working directly on a store."""

import pytest

from booking_registry_api.app.core.errors import NotFoundError, ValidationError


class TestCreateBooking:
    def test_defaults_are_applied(self, service):
        envelope = service.create_booking({"name": "A", "email": "a@b.com"})

        assert envelope.message == "Booking created"
        booking = envelope.booking
        assert booking.id == 1
        assert booking.tickets == 1
        assert booking.phone is None
        assert booking.organization is None
        assert booking.notes is None
        assert booking.created_at is not None
        assert booking.updated_at is None

    def test_empty_optional_text_becomes_none(self, service):
        booking = service.create_booking(
            {"name": "A", "email": "a@b.com", "phone": "", "organization": "", "notes": ""}
        ).booking
        assert booking.phone is None
        assert booking.organization is None
        assert booking.notes is None

    def test_integral_float_tickets_are_stored_as_int(self, service):
        booking = service.create_booking({"name": "A", "email": "a@b.com", "tickets": 4.0}).booking
        assert booking.tickets == 4
        assert isinstance(booking.tickets, int)

    def test_invalid_payload_leaves_store_untouched(self, service, store):
        with pytest.raises(ValidationError) as excinfo:
            service.create_booking({})
        assert excinfo.value.errors == ["name is required", "email is required"]
        assert len(store) == 0
        # A rejected payload does not consume an id.
        assert service.create_booking({"name": "A", "email": "a@b.com"}).booking.id == 1

    def test_ids_increase_monotonically(self, service):
        ids = [service.create_booking({"name": str(i), "email": "a@b.com"}).booking.id for i in range(5)]
        assert ids == sorted(ids)
        assert len(set(ids)) == 5


class TestUpdateBooking:
    def test_only_present_fields_change(self, service):
        original = service.create_booking(
            {"name": "A", "email": "a@b.com", "phone": "123", "tickets": 2}
        ).booking

        envelope = service.update_booking(original.id, {"notes": "window seat"})

        assert envelope.message == "Booking updated"
        updated = envelope.booking
        assert updated.notes == "window seat"
        assert updated.name == "A"
        assert updated.phone == "123"
        assert updated.tickets == 2
        assert updated.updated_at is not None

    def test_empty_update_still_stamps_updated_at(self, service):
        booking = service.create_booking({"name": "A", "email": "a@b.com"}).booking
        updated = service.update_booking(booking.id, {}).booking
        assert updated.updated_at is not None
        assert updated.updated_at >= updated.created_at

    def test_explicit_none_clears_a_field(self, service):
        booking = service.create_booking({"name": "A", "email": "a@b.com", "phone": "123"}).booking
        assert service.update_booking(booking.id, {"phone": None}).booking.phone is None

    def test_fields_outside_allow_list_are_ignored(self, service):
        booking = service.create_booking({"name": "A", "email": "a@b.com"}).booking
        created_at = booking.created_at

        updated = service.update_booking(
            booking.id, {"id": 77, "created_at": "yesterday", "createdAt": "yesterday", "vip": True}
        ).booking

        assert updated.id == booking.id
        assert updated.created_at == created_at
        assert not hasattr(updated, "vip")

    def test_missing_booking_is_reported_before_validation(self, service):
        with pytest.raises(NotFoundError):
            service.update_booking(999, {"tickets": -5, "email": "bad"})

    def test_invalid_update_is_rejected_without_changes(self, service):
        booking = service.create_booking({"name": "A", "email": "a@b.com"}).booking
        with pytest.raises(ValidationError) as excinfo:
            service.update_booking(booking.id, {"name": "B", "tickets": 0})
        assert excinfo.value.errors == ["tickets must be a positive integer"]
        assert service.get_booking(booking.id).name == "A"
        assert service.get_booking(booking.id).updated_at is None

    def test_update_keeps_position_in_list(self, service):
        for name in ("first", "second", "third"):
            service.create_booking({"name": name, "email": "a@b.com"})
        service.update_booking(1, {"name": "renamed"})
        assert [b.name for b in service.list_bookings()] == ["renamed", "second", "third"]


class TestGetAndCancel:
    def test_get_unknown_booking(self, service):
        with pytest.raises(NotFoundError):
            service.get_booking(1)

    def test_cancel_returns_removed_booking(self, service):
        first = service.create_booking({"name": "first", "email": "a@b.com"}).booking
        service.create_booking({"name": "second", "email": "a@b.com"})

        envelope = service.cancel_booking(first.id)

        assert envelope.message == "Booking cancelled"
        assert envelope.booking.id == first.id
        assert [b.name for b in service.list_bookings()] == ["second"]
        with pytest.raises(NotFoundError):
            service.get_booking(first.id)

    def test_cancel_unknown_booking(self, service):
        with pytest.raises(NotFoundError):
            service.cancel_booking(3)
