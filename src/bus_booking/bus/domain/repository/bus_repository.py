from abc import abstractmethod

from bus_booking.bus.domain.entity import Bus
from bus_booking.bus.domain.value_object import BusId
from bus_booking.shared.domain import Repository


class BusRepository(Repository[Bus, BusId]):
    """バスリポジトリのインターフェース"""

    @abstractmethod
    def save(self, bus: Bus) -> None:
        """バスを追加する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, bus_id: BusId) -> Bus | None:
        """バスIDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Bus]:
        """全バスを取得する"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, bus_id: BusId) -> bool:
        """バスを削除する（存在しなければ False）"""
        raise NotImplementedError
