from bus_booking.bus.domain.repository import BusRepository
from bus_booking.bus.domain.value_object import BusId
from bus_booking.schedule.domain.repository import ScheduleRepository
from bus_booking.shared.domain import DeletionResult, IntegrityConflict
from bus_booking.shared.utils import get_logger

logger = get_logger("bus-service")


class DeleteBusService:
    """バス削除のユースケース（運行スケジュールに割り当て済みなら拒否）"""

    def __init__(
        self,
        repository: BusRepository,
        schedule_repository: ScheduleRepository,
    ) -> None:
        self._repository = repository
        self._schedule_repository = schedule_repository

    def delete(self, bus_id: BusId) -> DeletionResult:
        """バスを削除する"""
        schedules = self._schedule_repository.find_by_bus_id(bus_id)
        if schedules:
            logger.info(
                "Bus deletion refused",
                extra={"bus_id": str(bus_id), "schedules": len(schedules)},
            )
            return DeletionResult.refused(
                IntegrityConflict(
                    entity_type="bus",
                    entity_id=str(bus_id),
                    dependent_type="schedule",
                    dependent_ids=tuple(str(s.id) for s in schedules),
                    message=(
                        "Cannot delete this bus because it is assigned to "
                        "active schedules."
                    ),
                )
            )

        if not self._repository.delete(bus_id):
            return DeletionResult.not_found()
        return DeletionResult.ok()
