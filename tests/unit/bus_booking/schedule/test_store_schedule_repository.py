from bus_booking.bus.domain.value_object import BusId
from bus_booking.route.domain.value_object import RouteId
from bus_booking.schedule.infrastructure.store_schedule_repository import (
    StoreScheduleRepository,
)


class TestStoreScheduleRepository:
    def test_find_by_route_and_bus(self, store, create_schedule):
        repository = StoreScheduleRepository(store)
        repository.save(create_schedule(schedule_id="S1", route_id="R1", bus_id="B1"))
        repository.save(create_schedule(schedule_id="S2", route_id="R2", bus_id="B1"))

        assert [str(s.id) for s in repository.find_by_route_id(RouteId(value="R2"))] == [
            "S2"
        ]
        assert len(repository.find_by_bus_id(BusId(value="B1"))) == 2
        assert repository.find_by_bus_id(BusId(value="B9")) == []

    def test_blank_arrival_time_loads_as_none(self, store):
        store.save(
            "schedules",
            [
                {
                    "scheduleId": "S1",
                    "routeId": "R1",
                    "busId": "B1",
                    "departureDate": "2025-01-10",
                    "departureTime": "21:30",
                    "arrivalTime": "",
                    "fareMultiplier": "1.25",
                    "status": "Active",
                }
            ],
        )

        schedule = StoreScheduleRepository(store).find_all()[0]

        assert schedule.arrival_time is None
        assert schedule.fare_multiplier == 1.25

    def test_round_trip_keeps_stored_shape(self, store, storage, create_schedule):
        StoreScheduleRepository(store).save(create_schedule(fare_multiplier=1.1))

        loaded = StoreScheduleRepository(store).find_all()[0]

        assert str(loaded.departure_time) == "21:30"
        assert loaded.fare_multiplier == 1.1
        assert '"departureTime": "21:30"' in storage.get_item("schedules")
