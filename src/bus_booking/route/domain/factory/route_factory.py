from typing import NotRequired, TypedDict

from bus_booking.route.domain.entity import Route
from bus_booking.route.domain.value_object import RouteId
from bus_booking.shared.domain import TravelDuration


class RouteDetails(TypedDict):
    """路線の入力データ構造"""

    source: str
    destination: str
    duration: str
    base_fare: int
    distance: NotRequired[int | None]


class RouteFactory:
    """路線エンティティのファクトリ"""

    def create(self, details: RouteDetails) -> Route:
        """新しいIDを採番して路線を生成する"""
        return Route(
            id=RouteId.generate(),
            source=details["source"],
            destination=details["destination"],
            duration=TravelDuration(details["duration"]),
            base_fare=details["base_fare"],
            distance=details.get("distance"),
        )
