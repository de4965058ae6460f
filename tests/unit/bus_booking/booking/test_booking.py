import pytest

from bus_booking.booking.domain.enum import BookingStatus
from bus_booking.booking.domain.value_object import Passenger
from bus_booking.shared.domain import BusinessRuleViolationException


class TestBooking:
    def test_cancel_confirmed_booking(self, create_booking):
        booking = create_booking()
        booking.cancel()
        assert booking.status == BookingStatus.CANCELLED
        assert not booking.is_active

    def test_cancel_already_cancelled_booking(self, create_booking):
        booking = create_booking(status=BookingStatus.CANCELLED)
        booking.cancel()
        assert booking.status == BookingStatus.CANCELLED

    def test_cannot_confirm_cancelled_booking(self, create_booking):
        booking = create_booking(status=BookingStatus.CANCELLED)
        with pytest.raises(BusinessRuleViolationException):
            booking.confirm()

    def test_duplicate_seats_raise_error(self, create_booking):
        with pytest.raises(BusinessRuleViolationException, match="unique"):
            create_booking(seats=("1A", "1A"))

    def test_negative_fare_raises_error(self, create_booking):
        with pytest.raises(BusinessRuleViolationException):
            create_booking(total_fare=-1)

    def test_seat_count(self, create_booking):
        assert create_booking(seats=("1A", "1B", "2C")).seat_count == 3


class TestPassenger:
    def test_negative_age_raises_error(self):
        with pytest.raises(ValueError):
            Passenger(name="Meena", seat_number="1A", age=-1)
