from bus_booking.booking.domain.entity import Booking
from bus_booking.booking.domain.factory import BookingDetails, BookingFactory
from bus_booking.booking.domain.repository import BookingRepository
from bus_booking.booking.domain.value_object import BookingId
from bus_booking.shared.utils import get_logger

logger = get_logger("booking-service")


class UpdateBookingService:
    """予約の作成・部分更新のユースケース"""

    def __init__(self, repository: BookingRepository, factory: BookingFactory) -> None:
        self._repository = repository
        self._factory = factory

    def update(self, details: BookingDetails) -> Booking | None:
        """booking_id があれば既存予約を更新し、なければ新規作成する

        Returns:
            Booking | None: 保存した予約。更新対象が見つからない場合は None
        """
        booking_id = details.get("booking_id")
        if not booking_id:
            booking = self._factory.create(details)
            self._repository.save(booking)
            logger.info("Booking created", extra={"booking_id": str(booking.id)})
            return booking

        existing = self._repository.find_by_id(BookingId(value=booking_id))
        if existing is None:
            logger.warning("Booking to update not found", extra={"booking_id": booking_id})
            return None

        booking = self._factory.merge(existing, details)
        self._repository.update(booking)
        return booking
