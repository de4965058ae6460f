from dataclasses import dataclass

from bus_booking.booking.domain.repository import BookingRepository
from bus_booking.bus.domain.repository import BusRepository
from bus_booking.reporting.domain import (
    booked_seats,
    seat_labels,
    seats_available,
    ticket_fare,
)
from bus_booking.route.domain.repository import RouteRepository
from bus_booking.schedule.domain.repository import ScheduleRepository
from bus_booking.schedule.domain.value_object import ScheduleId


@dataclass(frozen=True)
class SeatMap:
    """座席選択画面用の座席状況"""

    schedule_id: str
    seats: list[str]
    booked: list[str]
    seats_available: int
    ticket_fare: int | None


class SeatMapService:
    """座席状況取得のユースケース"""

    def __init__(
        self,
        schedule_repository: ScheduleRepository,
        route_repository: RouteRepository,
        bus_repository: BusRepository,
        booking_repository: BookingRepository,
    ) -> None:
        self._schedule_repository = schedule_repository
        self._route_repository = route_repository
        self._bus_repository = bus_repository
        self._booking_repository = booking_repository

    def seat_map(self, schedule_id: ScheduleId) -> SeatMap | None:
        """スケジュールの座席状況を返す（スケジュールがなければ None）"""
        schedule = self._schedule_repository.find_by_id(schedule_id)
        if schedule is None:
            return None

        route = self._route_repository.find_by_id(schedule.route_id)
        bookings = self._booking_repository.find_by_schedule_id(schedule_id)
        return SeatMap(
            schedule_id=str(schedule_id),
            seats=seat_labels(),
            booked=booked_seats(schedule_id, bookings),
            seats_available=seats_available(
                schedule, self._bus_repository.find_all(), bookings
            ),
            ticket_fare=ticket_fare(route, schedule) if route else None,
        )
