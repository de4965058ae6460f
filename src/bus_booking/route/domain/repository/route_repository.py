from abc import abstractmethod

from bus_booking.route.domain.entity import Route
from bus_booking.route.domain.value_object import RouteId
from bus_booking.shared.domain import Repository


class RouteRepository(Repository[Route, RouteId]):
    """路線リポジトリのインターフェース"""

    @abstractmethod
    def save(self, route: Route) -> None:
        """路線を追加する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, route_id: RouteId) -> Route | None:
        """路線IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Route]:
        """全路線を取得する"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, route_id: RouteId) -> bool:
        """路線を削除する（存在しなければ False）"""
        raise NotImplementedError
