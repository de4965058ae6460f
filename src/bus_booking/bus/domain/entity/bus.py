from collections.abc import Iterable

from bus_booking.bus.domain.value_object import BusId
from bus_booking.shared.domain import Entity
from bus_booking.shared.domain.exception import BusinessRuleViolationException

DEFAULT_BUS_CAPACITY = 24


class Bus(Entity[BusId]):
    """バス（運行会社・座席タイプ・座席数・設備）"""

    def __init__(
        self,
        id: BusId,
        name: str,
        seat_type: str = "AC Seater",
        total_seats: int = DEFAULT_BUS_CAPACITY,
        amenities: Iterable[str] = (),
    ) -> None:
        super().__init__(id)
        self._name = name.strip()
        self._seat_type = seat_type
        self._total_seats = total_seats
        # 重複は除き、登録順は保つ
        self._amenities = tuple(dict.fromkeys(amenities))

        if not self._name:
            raise BusinessRuleViolationException("Bus operator name is required")
        if self._total_seats <= 0:
            raise BusinessRuleViolationException("Total seats must be positive")

    @property
    def name(self) -> str:
        return self._name

    @property
    def seat_type(self) -> str:
        return self._seat_type

    @property
    def total_seats(self) -> int:
        return self._total_seats

    @property
    def amenities(self) -> tuple[str, ...]:
        return self._amenities
