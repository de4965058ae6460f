from typing import NotRequired, TypedDict

from bus_booking.bus.domain.value_object import BusId
from bus_booking.route.domain.value_object import RouteId
from bus_booking.schedule.domain.entity import Schedule
from bus_booking.schedule.domain.enum import ScheduleStatus
from bus_booking.schedule.domain.value_object import ScheduleId
from bus_booking.shared.domain import TimeOfDay


class ScheduleDetails(TypedDict):
    """運行スケジュールの入力データ構造"""

    route_id: str
    bus_id: str
    departure_date: str
    departure_time: str
    fare_multiplier: NotRequired[float]


class ScheduleFactory:
    """運行スケジュールエンティティのファクトリ"""

    def create(
        self, details: ScheduleDetails, arrival_time: TimeOfDay | None = None
    ) -> Schedule:
        """新しいIDを採番して ACTIVE 状態のスケジュールを生成する

        Args:
            details: スケジュールの入力データ
            arrival_time: 路線の所要時間から算出した到着時刻
        """
        return Schedule(
            id=ScheduleId.generate(),
            route_id=RouteId(value=details["route_id"]),
            bus_id=BusId(value=details["bus_id"]),
            departure_date=details["departure_date"],
            departure_time=TimeOfDay(details["departure_time"]),
            arrival_time=arrival_time,
            fare_multiplier=details.get("fare_multiplier", 1.0),
            status=ScheduleStatus.ACTIVE,
        )
