from bus_booking.bus.domain.value_object import BusId
from bus_booking.bus.infrastructure.store_bus_repository import StoreBusRepository
from bus_booking.shared.infrastructure import CollectionStore, InMemoryKeyValueStorage


class TestStoreBusRepository:
    def test_round_trip(self, store, create_bus):
        repository = StoreBusRepository(store)
        repository.save(create_bus(amenities=("AC", "Blanket")))

        bus = repository.find_by_id(BusId(value="B2001"))

        assert bus is not None
        assert bus.name == "Parveen Travels"
        assert bus.amenities == ("AC", "Blanket")

    def test_missing_optional_fields_use_defaults(self, store):
        store.save("buses", [{"busId": "B1", "name": "KPN Travels"}])

        bus = StoreBusRepository(store).find_all()[0]

        assert bus.total_seats == 24
        assert bus.seat_type == "AC Seater"
        assert bus.amenities == ()

    def test_seed_buses(self):
        repository = StoreBusRepository(CollectionStore(InMemoryKeyValueStorage()))
        assert [str(b.id) for b in repository.find_all()] == ["B2001", "B2002", "B2003"]
