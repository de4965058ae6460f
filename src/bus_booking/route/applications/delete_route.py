from bus_booking.route.domain.repository import RouteRepository
from bus_booking.route.domain.value_object import RouteId
from bus_booking.schedule.domain.repository import ScheduleRepository
from bus_booking.shared.domain import DeletionResult, IntegrityConflict
from bus_booking.shared.utils import get_logger

logger = get_logger("route-service")


class DeleteRouteService:
    """路線削除のユースケース

    運行スケジュールから参照されている路線は削除せず、拒否理由を返す。
    """

    def __init__(
        self,
        repository: RouteRepository,
        schedule_repository: ScheduleRepository,
    ) -> None:
        self._repository = repository
        self._schedule_repository = schedule_repository

    def delete(self, route_id: RouteId) -> DeletionResult:
        """路線を削除する"""
        schedules = self._schedule_repository.find_by_route_id(route_id)
        if schedules:
            logger.info(
                "Route deletion refused",
                extra={"route_id": str(route_id), "schedules": len(schedules)},
            )
            return DeletionResult.refused(
                IntegrityConflict(
                    entity_type="route",
                    entity_id=str(route_id),
                    dependent_type="schedule",
                    dependent_ids=tuple(str(s.id) for s in schedules),
                    message=(
                        "Cannot delete this route because active bus schedules "
                        "are using it."
                    ),
                )
            )

        if not self._repository.delete(route_id):
            return DeletionResult.not_found()
        return DeletionResult.ok()
