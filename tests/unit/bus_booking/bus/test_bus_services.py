from unittest.mock import MagicMock

from bus_booking.bus.applications.add_bus import AddBusService
from bus_booking.bus.applications.delete_bus import DeleteBusService
from bus_booking.bus.domain.factory import BusFactory
from bus_booking.bus.domain.value_object import BusId
from bus_booking.bus.infrastructure.store_bus_repository import StoreBusRepository
from bus_booking.schedule.infrastructure.store_schedule_repository import (
    StoreScheduleRepository,
)


class TestAddBusService:
    def test_add_creates_and_saves_bus(self, mock_repository):
        service = AddBusService(repository=mock_repository, factory=BusFactory())

        bus = service.add({"name": "SRS Travels", "amenities": ["AC", "TV"]})

        assert bus.amenities == ("AC", "TV")
        mock_repository.save.assert_called_once_with(bus)


class TestDeleteBusService:
    def test_delete_assigned_bus_is_refused(self, store, create_bus, create_schedule):
        bus_repository = StoreBusRepository(store)
        schedule_repository = StoreScheduleRepository(store)
        bus_repository.save(create_bus())
        schedule_repository.save(create_schedule(schedule_id="SCD1"))
        schedule_repository.save(create_schedule(schedule_id="SCD2"))
        service = DeleteBusService(
            repository=bus_repository, schedule_repository=schedule_repository
        )

        result = service.delete(BusId(value="B2001"))

        assert result.refused_by_conflict
        assert result.conflict.dependent_type == "schedule"
        assert result.conflict.dependent_ids == ("SCD1", "SCD2")
        assert len(bus_repository.find_all()) == 1

    def test_delete_unassigned_bus(self, store, create_bus, create_schedule):
        bus_repository = StoreBusRepository(store)
        schedule_repository = StoreScheduleRepository(store)
        bus_repository.save(create_bus(bus_id="B1"))
        bus_repository.save(create_bus(bus_id="B2"))
        schedule_repository.save(create_schedule(bus_id="B2"))
        service = DeleteBusService(
            repository=bus_repository, schedule_repository=schedule_repository
        )

        result = service.delete(BusId(value="B1"))

        assert result.deleted is True
        assert [str(b.id) for b in bus_repository.find_all()] == ["B2"]

    def test_delete_unknown_bus(self):
        bus_repository = MagicMock()
        schedule_repository = MagicMock()
        schedule_repository.find_by_bus_id.return_value = []
        bus_repository.delete.return_value = False
        service = DeleteBusService(
            repository=bus_repository, schedule_repository=schedule_repository
        )

        result = service.delete(BusId(value="B404"))

        assert result.deleted is False
        assert result.conflict is None
