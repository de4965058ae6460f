from pydantic import field_validator

from bus_booking.route.domain.entity import Route
from bus_booking.route.domain.repository import RouteRepository
from bus_booking.route.domain.value_object import RouteId
from bus_booking.shared.domain import TravelDuration
from bus_booking.shared.infrastructure import CollectionRepository, StoredRecord
from bus_booking.shared.utils import blank_to_none


class RouteRecord(StoredRecord):
    """routes コレクションの保存形式"""

    route_id: str
    source: str
    destination: str
    distance: int | None = None
    duration: str
    base_fare: int

    @field_validator("distance", mode="before")
    @classmethod
    def blank_distance_to_none(cls, v):
        return blank_to_none(v)


class StoreRouteRepository(CollectionRepository[Route, RouteRecord], RouteRepository):
    """CollectionStore を使用した RouteRepository の具象実装"""

    collection_name = "routes"
    record_model = RouteRecord

    def delete(self, route_id: RouteId) -> bool:
        """路線を削除する"""
        return self._remove(route_id)

    def _to_entity(self, record: RouteRecord) -> Route:
        return Route(
            id=RouteId(value=record.route_id),
            source=record.source,
            destination=record.destination,
            duration=TravelDuration(record.duration),
            base_fare=record.base_fare,
            distance=record.distance,
        )

    def _to_record(self, route: Route) -> RouteRecord:
        return RouteRecord(
            route_id=str(route.id),
            source=route.source,
            destination=route.destination,
            distance=route.distance,
            duration=str(route.duration),
            base_fare=route.base_fare,
        )
