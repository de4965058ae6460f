from datetime import date

from bus_booking.bus.domain.value_object import BusId
from bus_booking.route.domain.value_object import RouteId
from bus_booking.schedule.domain.enum import ScheduleStatus
from bus_booking.schedule.domain.value_object import ScheduleId
from bus_booking.shared.domain import Entity, TimeOfDay
from bus_booking.shared.domain.exception import BusinessRuleViolationException


class Schedule(Entity[ScheduleId]):
    """運行スケジュール（路線 × バス × 出発日時）"""

    def __init__(
        self,
        id: ScheduleId,
        route_id: RouteId,
        bus_id: BusId,
        departure_date: str,
        departure_time: TimeOfDay,
        arrival_time: TimeOfDay | None = None,
        fare_multiplier: float = 1.0,
        status: ScheduleStatus = ScheduleStatus.ACTIVE,
    ) -> None:
        super().__init__(id)
        self._route_id = route_id
        self._bus_id = bus_id
        self._departure_date = departure_date
        self._departure_time = departure_time
        self._arrival_time = arrival_time
        self._fare_multiplier = fare_multiplier
        self._status = status

        self._validate()

    def _validate(self) -> None:
        try:
            date.fromisoformat(self._departure_date)
        except ValueError as e:
            raise ValueError(f"Invalid departure date: {self._departure_date}") from e
        if self._fare_multiplier <= 0:
            raise BusinessRuleViolationException("Fare multiplier must be positive")

    @property
    def route_id(self) -> RouteId:
        return self._route_id

    @property
    def bus_id(self) -> BusId:
        return self._bus_id

    @property
    def departure_date(self) -> str:
        return self._departure_date

    @property
    def departure_time(self) -> TimeOfDay:
        return self._departure_time

    @property
    def arrival_time(self) -> TimeOfDay | None:
        """到着時刻（日付の繰り上がりは持たない）"""
        return self._arrival_time

    @property
    def fare_multiplier(self) -> float:
        return self._fare_multiplier

    @property
    def status(self) -> ScheduleStatus:
        return self._status
