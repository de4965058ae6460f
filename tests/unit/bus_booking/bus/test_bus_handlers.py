import json

import pytest

from bus_booking.bus.applications.add_bus import AddBusService
from bus_booking.bus.applications.delete_bus import DeleteBusService
from bus_booking.bus.domain.factory import BusFactory
from bus_booking.bus.handlers import add, delete
from bus_booking.bus.infrastructure.store_bus_repository import StoreBusRepository
from bus_booking.schedule.infrastructure.store_schedule_repository import (
    StoreScheduleRepository,
)


@pytest.fixture
def bus_repository(store):
    return StoreBusRepository(store)


class TestAddBusHandler:
    @pytest.fixture(autouse=True)
    def _service(self, monkeypatch, bus_repository):
        monkeypatch.setattr(
            add, "service", AddBusService(repository=bus_repository, factory=BusFactory())
        )

    def test_add_bus(self, api_event, lambda_context, bus_repository):
        event = api_event(body={"name": "KPN Travels", "amenities": ["AC", "WiFi"]})

        response = add.lambda_handler(event, lambda_context)

        data = json.loads(response["body"])["data"]
        assert response["statusCode"] == 201
        assert data["bus_id"].startswith("B")
        assert data["total_seats"] == 24
        assert data["amenities"] == ["AC", "WiFi"]
        assert len(bus_repository.find_all()) == 1

    def test_missing_name_returns_400(self, api_event, lambda_context):
        response = add.lambda_handler(api_event(body={"total_seats": 30}), lambda_context)
        assert response["statusCode"] == 400

    def test_blank_name_returns_400(self, api_event, lambda_context, bus_repository):
        response = add.lambda_handler(api_event(body={"name": "   "}), lambda_context)

        assert response["statusCode"] == 400
        assert bus_repository.find_all() == []


class TestDeleteBusHandler:
    @pytest.fixture(autouse=True)
    def _service(self, monkeypatch, store, bus_repository):
        monkeypatch.setattr(
            delete,
            "service",
            DeleteBusService(
                repository=bus_repository,
                schedule_repository=StoreScheduleRepository(store),
            ),
        )

    def test_delete_scheduled_bus_returns_409(
        self, api_event, lambda_context, store, bus_repository, create_bus, create_schedule
    ):
        bus_repository.save(create_bus())
        StoreScheduleRepository(store).save(create_schedule())

        response = delete.lambda_handler(
            api_event(path_parameters={"bus_id": "B2001"}), lambda_context
        )

        assert response["statusCode"] == 409
        assert len(bus_repository.find_all()) == 1

    def test_delete_unknown_bus_returns_404(self, api_event, lambda_context):
        response = delete.lambda_handler(
            api_event(path_parameters={"bus_id": "B404"}), lambda_context
        )
        assert response["statusCode"] == 404

    def test_blank_bus_id_returns_400(self, api_event, lambda_context):
        response = delete.lambda_handler(
            api_event(path_parameters={"bus_id": " "}), lambda_context
        )
        assert response["statusCode"] == 400
