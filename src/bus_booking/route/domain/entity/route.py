from bus_booking.route.domain.value_object import RouteId
from bus_booking.shared.domain import Entity, TravelDuration
from bus_booking.shared.domain.exception import BusinessRuleViolationException


class Route(Entity[RouteId]):
    """路線（出発地・目的地の組と基本運賃）"""

    def __init__(
        self,
        id: RouteId,
        source: str,
        destination: str,
        duration: TravelDuration,
        base_fare: int,
        distance: int | None = None,
    ) -> None:
        super().__init__(id)
        self._source = source.strip()
        self._destination = destination.strip()
        self._duration = duration
        self._base_fare = base_fare
        self._distance = distance

        self._validate()

    def _validate(self) -> None:
        if not self._source or not self._destination:
            raise BusinessRuleViolationException(
                "Route source and destination are required"
            )
        if self._base_fare < 0:
            raise BusinessRuleViolationException("Base fare cannot be negative")

    @property
    def source(self) -> str:
        return self._source

    @property
    def destination(self) -> str:
        return self._destination

    @property
    def duration(self) -> TravelDuration:
        return self._duration

    @property
    def base_fare(self) -> int:
        return self._base_fare

    @property
    def distance(self) -> int | None:
        return self._distance

    @property
    def label(self) -> str:
        """表示用の路線名（例: "Chennai ➝ Madurai"）"""
        return f"{self._source} ➝ {self._destination}"
