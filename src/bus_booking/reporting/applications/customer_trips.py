from bus_booking.booking.domain.repository import BookingRepository
from bus_booking.customer.domain.value_object import CustomerId
from bus_booking.reporting.domain import CustomerTrip, customer_trips
from bus_booking.route.domain.repository import RouteRepository
from bus_booking.schedule.domain.repository import ScheduleRepository


class CustomerTripsService:
    """顧客の予約履歴取得のユースケース"""

    def __init__(
        self,
        booking_repository: BookingRepository,
        schedule_repository: ScheduleRepository,
        route_repository: RouteRepository,
    ) -> None:
        self._booking_repository = booking_repository
        self._schedule_repository = schedule_repository
        self._route_repository = route_repository

    def trips(self, customer_id: CustomerId) -> list[CustomerTrip]:
        return customer_trips(
            customer_id,
            bookings=self._booking_repository.find_by_customer_id(customer_id),
            schedules=self._schedule_repository.find_all(),
            routes=self._route_repository.find_all(),
        )
