from typing import NotRequired, TypedDict

from bus_booking.bus.domain.entity import DEFAULT_BUS_CAPACITY, Bus
from bus_booking.bus.domain.value_object import BusId


class BusDetails(TypedDict):
    """バスの入力データ構造"""

    name: str
    seat_type: NotRequired[str]
    total_seats: NotRequired[int]
    amenities: NotRequired[list[str]]


class BusFactory:
    """バスエンティティのファクトリ"""

    def create(self, details: BusDetails) -> Bus:
        """新しいIDを採番してバスを生成する"""
        return Bus(
            id=BusId.generate(),
            name=details["name"],
            seat_type=details.get("seat_type", "AC Seater"),
            total_seats=details.get("total_seats", DEFAULT_BUS_CAPACITY),
            amenities=details.get("amenities", []),
        )
