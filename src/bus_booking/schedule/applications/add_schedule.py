from datetime import date, timedelta

from bus_booking.bus.domain.repository import BusRepository
from bus_booking.bus.domain.value_object import BusId
from bus_booking.reporting.domain.arrival_time import compute_arrival_time
from bus_booking.route.domain.repository import RouteRepository
from bus_booking.route.domain.value_object import RouteId
from bus_booking.schedule.domain.entity import Schedule
from bus_booking.schedule.domain.factory import ScheduleDetails, ScheduleFactory
from bus_booking.schedule.domain.repository import ScheduleRepository
from bus_booking.shared.domain import ResourceNotFoundException, TimeOfDay
from bus_booking.shared.utils import get_logger

logger = get_logger("schedule-service")


class AddScheduleService:
    """運行スケジュール追加のユースケース

    到着時刻は路線の所要時間から算出して保存する。
    """

    def __init__(
        self,
        repository: ScheduleRepository,
        route_repository: RouteRepository,
        bus_repository: BusRepository,
        factory: ScheduleFactory,
    ) -> None:
        self._repository = repository
        self._route_repository = route_repository
        self._bus_repository = bus_repository
        self._factory = factory

    def add(self, details: ScheduleDetails) -> Schedule:
        """スケジュールを1件追加する

        Raises:
            ResourceNotFoundException: 路線またはバスが存在しない場合
        """
        route = self._route_repository.find_by_id(RouteId(value=details["route_id"]))
        if route is None:
            raise ResourceNotFoundException(f"Route not found: {details['route_id']}")
        if self._bus_repository.find_by_id(BusId(value=details["bus_id"])) is None:
            raise ResourceNotFoundException(f"Bus not found: {details['bus_id']}")

        departure = TimeOfDay(details["departure_time"])
        arrival = compute_arrival_time(str(departure), str(route.duration))
        schedule = self._factory.create(
            details, arrival_time=TimeOfDay(arrival) if arrival else None
        )
        self._repository.save(schedule)
        logger.info(
            "Schedule added",
            extra={"schedule_id": str(schedule.id), "date": schedule.departure_date},
        )
        return schedule

    def add_series(self, details: ScheduleDetails, repeat_days: int) -> list[Schedule]:
        """出発日から連続する repeat_days 日分のスケジュールを追加する"""
        if repeat_days < 1:
            raise ValueError("repeat_days must be at least 1")

        start = date.fromisoformat(details["departure_date"])
        return [
            self.add(
                {
                    **details,
                    "departure_date": (start + timedelta(days=offset)).isoformat(),
                }
            )
            for offset in range(repeat_days)
        ]
