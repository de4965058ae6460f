from bus_booking.route.domain.entity import Route
from bus_booking.route.domain.factory import RouteDetails, RouteFactory
from bus_booking.route.domain.repository import RouteRepository


class AddRouteService:
    """路線追加のユースケース"""

    def __init__(self, repository: RouteRepository, factory: RouteFactory) -> None:
        self._repository = repository
        self._factory = factory

    def add(self, details: RouteDetails) -> Route:
        """路線を追加する"""
        route = self._factory.create(details)
        self._repository.save(route)
        return route
