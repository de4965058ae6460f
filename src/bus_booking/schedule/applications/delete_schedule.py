from bus_booking.booking.domain.repository import BookingRepository
from bus_booking.schedule.domain.repository import ScheduleRepository
from bus_booking.schedule.domain.value_object import ScheduleId
from bus_booking.shared.domain import DeletionResult, IntegrityConflict
from bus_booking.shared.utils import get_logger

logger = get_logger("schedule-service")


class DeleteScheduleService:
    """運行スケジュール削除のユースケース

    キャンセル済み以外の予約が残っているスケジュールは削除しない。
    """

    def __init__(
        self,
        repository: ScheduleRepository,
        booking_repository: BookingRepository,
    ) -> None:
        self._repository = repository
        self._booking_repository = booking_repository

    def delete(self, schedule_id: ScheduleId) -> DeletionResult:
        """スケジュールを削除する"""
        bookings = [
            booking
            for booking in self._booking_repository.find_by_schedule_id(schedule_id)
            if booking.is_active
        ]
        if bookings:
            logger.info(
                "Schedule deletion refused",
                extra={"schedule_id": str(schedule_id), "bookings": len(bookings)},
            )
            return DeletionResult.refused(
                IntegrityConflict(
                    entity_type="schedule",
                    entity_id=str(schedule_id),
                    dependent_type="booking",
                    dependent_ids=tuple(str(b.id) for b in bookings),
                    message=(
                        "Cannot delete this schedule because passengers have "
                        "already booked tickets. Cancel their bookings first."
                    ),
                )
            )

        if not self._repository.delete(schedule_id):
            return DeletionResult.not_found()
        return DeletionResult.ok()
