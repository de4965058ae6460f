from bus_booking.bus.domain.entity import Bus
from bus_booking.bus.domain.factory import BusDetails, BusFactory
from bus_booking.bus.domain.repository import BusRepository


class AddBusService:
    """バス追加のユースケース"""

    def __init__(self, repository: BusRepository, factory: BusFactory) -> None:
        self._repository = repository
        self._factory = factory

    def add(self, details: BusDetails) -> Bus:
        """バスを追加する"""
        bus = self._factory.create(details)
        self._repository.save(bus)
        return bus
