from datetime import datetime, timezone

from bus_booking.booking.applications.update_booking import UpdateBookingService
from bus_booking.booking.domain.entity import MAX_SEATS_PER_BOOKING, Booking
from bus_booking.booking.domain.enum import BookingStatus
from bus_booking.booking.domain.factory import BookingDetails
from bus_booking.booking.domain.repository import BookingRepository
from bus_booking.booking.domain.value_object import PaymentId
from bus_booking.reporting.domain.seat_availability import seat_labels
from bus_booking.schedule.domain.repository import ScheduleRepository
from bus_booking.schedule.domain.value_object import ScheduleId
from bus_booking.shared.domain import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
    SeatUnavailableException,
)
from bus_booking.shared.utils import get_logger

logger = get_logger("booking-service")

PAYMENT_STATUS_PAID = "Paid"


class ConfirmBookingService:
    """決済確定を受けて予約を記録するユースケース

    決済が成功した場合のみ、座席が他の有効な予約と重複していないことを
    書き込み直前に確認してから予約を作成する。
    """

    def __init__(
        self,
        repository: BookingRepository,
        schedule_repository: ScheduleRepository,
        update_service: UpdateBookingService,
    ) -> None:
        self._repository = repository
        self._schedule_repository = schedule_repository
        self._update_service = update_service

    def confirm(
        self, payload: BookingDetails, payment_succeeded: bool = True
    ) -> Booking | None:
        """予約を確定する

        Args:
            payload: 座席選択・乗客入力で組み立てた予約内容
            payment_succeeded: 決済結果

        Returns:
            Booking | None: 作成した予約。決済失敗時は None

        Raises:
            SeatUnavailableException: 選択座席が既に予約されている場合
            ResourceNotFoundException: 運行スケジュールが存在しない場合
            BusinessRuleViolationException: 座席数が 0 または上限を超える場合、
                存在しない座席番号を含む場合
        """
        if not payment_succeeded:
            logger.info("Payment failed, booking not recorded")
            return None

        seats = list(payload.get("seats_booked", []))
        if not seats:
            raise BusinessRuleViolationException("At least one seat must be selected")
        if len(seats) > MAX_SEATS_PER_BOOKING:
            raise BusinessRuleViolationException(
                f"Cannot book more than {MAX_SEATS_PER_BOOKING} seats at once"
            )

        schedule_id = ScheduleId(value=payload["schedule_id"])
        if self._schedule_repository.find_by_id(schedule_id) is None:
            raise ResourceNotFoundException(f"Schedule not found: {schedule_id}")

        unknown = [seat for seat in seats if seat not in seat_labels()]
        if unknown:
            raise BusinessRuleViolationException(
                f"Unknown seat number: {', '.join(unknown)}"
            )

        held = {
            seat
            for booking in self._repository.find_by_schedule_id(schedule_id)
            if booking.is_active
            for seat in booking.seats_booked
        }
        taken = [seat for seat in seats if seat in held]
        if taken:
            raise SeatUnavailableException(str(schedule_id), taken)

        details: BookingDetails = {
            key: value for key, value in payload.items() if key != "booking_id"
        }
        details["status"] = BookingStatus.CONFIRMED.value
        details["payment_status"] = PAYMENT_STATUS_PAID
        details["payment_id"] = str(PaymentId.generate())
        details["booked_at"] = datetime.now(timezone.utc).isoformat()

        booking = self._update_service.update(details)
        logger.info(
            "Booking confirmed",
            extra={"schedule_id": str(schedule_id), "seats": seats},
        )
        return booking
