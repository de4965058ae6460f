from bus_booking.booking.domain.repository import BookingRepository
from bus_booking.bus.domain.repository import BusRepository
from bus_booking.reporting.domain import TripOption, list_cities, search_trips
from bus_booking.route.domain.repository import RouteRepository
from bus_booking.schedule.domain.repository import ScheduleRepository


class SearchTripsService:
    """運行便検索のユースケース"""

    def __init__(
        self,
        route_repository: RouteRepository,
        bus_repository: BusRepository,
        schedule_repository: ScheduleRepository,
        booking_repository: BookingRepository,
    ) -> None:
        self._route_repository = route_repository
        self._bus_repository = bus_repository
        self._schedule_repository = schedule_repository
        self._booking_repository = booking_repository

    def search(
        self, source: str | None, destination: str | None, departure_date: str | None
    ) -> list[TripOption]:
        """条件に一致する運行便を空席数・運賃付きで返す"""
        return search_trips(
            source,
            destination,
            departure_date,
            schedules=self._schedule_repository.find_all(),
            routes=self._route_repository.find_all(),
            buses=self._bus_repository.find_all(),
            bookings=self._booking_repository.find_all(),
        )

    def cities(self) -> list[str]:
        """入力補完用の都市名一覧"""
        return list_cities(self._route_repository.find_all())
