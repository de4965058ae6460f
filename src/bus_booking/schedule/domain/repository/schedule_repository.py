from abc import abstractmethod

from bus_booking.bus.domain.value_object import BusId
from bus_booking.route.domain.value_object import RouteId
from bus_booking.schedule.domain.entity import Schedule
from bus_booking.schedule.domain.value_object import ScheduleId
from bus_booking.shared.domain import Repository


class ScheduleRepository(Repository[Schedule, ScheduleId]):
    """運行スケジュールリポジトリのインターフェース"""

    @abstractmethod
    def save(self, schedule: Schedule) -> None:
        """スケジュールを追加する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, schedule_id: ScheduleId) -> Schedule | None:
        """スケジュールIDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Schedule]:
        """全スケジュールを取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_route_id(self, route_id: RouteId) -> list[Schedule]:
        """路線IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_bus_id(self, bus_id: BusId) -> list[Schedule]:
        """バスIDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, schedule_id: ScheduleId) -> bool:
        """スケジュールを削除する（存在しなければ False）"""
        raise NotImplementedError
