from pydantic import field_validator

from bus_booking.bus.domain.value_object import BusId
from bus_booking.route.domain.value_object import RouteId
from bus_booking.schedule.domain.entity import Schedule
from bus_booking.schedule.domain.enum import ScheduleStatus
from bus_booking.schedule.domain.repository import ScheduleRepository
from bus_booking.schedule.domain.value_object import ScheduleId
from bus_booking.shared.domain import TimeOfDay
from bus_booking.shared.infrastructure import CollectionRepository, StoredRecord
from bus_booking.shared.utils import blank_to_none


class ScheduleRecord(StoredRecord):
    """schedules コレクションの保存形式"""

    schedule_id: str
    route_id: str
    bus_id: str
    departure_date: str
    departure_time: str
    arrival_time: str | None = None
    fare_multiplier: float = 1.0
    status: ScheduleStatus = ScheduleStatus.ACTIVE

    @field_validator("arrival_time", mode="before")
    @classmethod
    def blank_arrival_to_none(cls, v):
        return blank_to_none(v)


class StoreScheduleRepository(
    CollectionRepository[Schedule, ScheduleRecord], ScheduleRepository
):
    """CollectionStore を使用した ScheduleRepository の具象実装"""

    collection_name = "schedules"
    record_model = ScheduleRecord

    def find_by_route_id(self, route_id: RouteId) -> list[Schedule]:
        return [s for s in self._load() if s.route_id == route_id]

    def find_by_bus_id(self, bus_id: BusId) -> list[Schedule]:
        return [s for s in self._load() if s.bus_id == bus_id]

    def delete(self, schedule_id: ScheduleId) -> bool:
        """スケジュールを削除する"""
        return self._remove(schedule_id)

    def _to_entity(self, record: ScheduleRecord) -> Schedule:
        return Schedule(
            id=ScheduleId(value=record.schedule_id),
            route_id=RouteId(value=record.route_id),
            bus_id=BusId(value=record.bus_id),
            departure_date=record.departure_date,
            departure_time=TimeOfDay(record.departure_time),
            arrival_time=(
                TimeOfDay(record.arrival_time) if record.arrival_time else None
            ),
            fare_multiplier=record.fare_multiplier,
            status=record.status,
        )

    def _to_record(self, schedule: Schedule) -> ScheduleRecord:
        return ScheduleRecord(
            schedule_id=str(schedule.id),
            route_id=str(schedule.route_id),
            bus_id=str(schedule.bus_id),
            departure_date=schedule.departure_date,
            departure_time=str(schedule.departure_time),
            arrival_time=(
                str(schedule.arrival_time) if schedule.arrival_time else None
            ),
            fare_multiplier=schedule.fare_multiplier,
            status=schedule.status,
        )
