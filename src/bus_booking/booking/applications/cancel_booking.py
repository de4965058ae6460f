from bus_booking.booking.domain.entity import Booking
from bus_booking.booking.domain.repository import BookingRepository
from bus_booking.booking.domain.value_object import BookingId


class CancelBookingService:
    """予約キャンセルのユースケース（冪等）"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def cancel(self, booking_id: BookingId) -> Booking | None:
        """予約をキャンセルする"""
        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            return None
        if not booking.is_active:
            return booking
        booking.cancel()
        self._repository.update(booking)
        return booking
