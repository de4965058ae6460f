from bus_booking.bus.domain.entity import DEFAULT_BUS_CAPACITY, Bus
from bus_booking.bus.domain.repository import BusRepository
from bus_booking.bus.domain.value_object import BusId
from bus_booking.shared.infrastructure import CollectionRepository, StoredRecord


class BusRecord(StoredRecord):
    """buses コレクションの保存形式"""

    bus_id: str
    name: str
    seat_type: str = "AC Seater"
    total_seats: int = DEFAULT_BUS_CAPACITY
    amenities: list[str] = []


class StoreBusRepository(CollectionRepository[Bus, BusRecord], BusRepository):
    """CollectionStore を使用した BusRepository の具象実装"""

    collection_name = "buses"
    record_model = BusRecord

    def delete(self, bus_id: BusId) -> bool:
        """バスを削除する"""
        return self._remove(bus_id)

    def _to_entity(self, record: BusRecord) -> Bus:
        return Bus(
            id=BusId(value=record.bus_id),
            name=record.name,
            seat_type=record.seat_type,
            total_seats=record.total_seats,
            amenities=record.amenities,
        )

    def _to_record(self, bus: Bus) -> BusRecord:
        return BusRecord(
            bus_id=str(bus.id),
            name=bus.name,
            seat_type=bus.seat_type,
            total_seats=bus.total_seats,
            amenities=list(bus.amenities),
        )
