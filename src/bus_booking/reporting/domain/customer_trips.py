from dataclasses import dataclass

from bus_booking.booking.domain.entity import Booking
from bus_booking.customer.domain.value_object import CustomerId
from bus_booking.route.domain.entity import Route
from bus_booking.schedule.domain.entity import Schedule


@dataclass(frozen=True)
class CustomerTrip:
    """顧客の予約と運行情報"""

    booking: Booking
    date: str
    time: str
    source: str
    destination: str


def customer_trips(
    customer_id: CustomerId,
    bookings: list[Booking],
    schedules: list[Schedule],
    routes: list[Route],
) -> list[CustomerTrip]:
    """顧客の予約一覧（キャンセル済みを含む）"""
    schedules_by_id = {s.id: s for s in schedules}
    routes_by_id = {r.id: r for r in routes}

    trips = []
    for booking in bookings:
        if booking.customer_id != customer_id:
            continue
        schedule = schedules_by_id.get(booking.schedule_id)
        route = routes_by_id.get(schedule.route_id) if schedule else None
        trips.append(
            CustomerTrip(
                booking=booking,
                date=schedule.departure_date if schedule else "N/A",
                time=str(schedule.departure_time) if schedule else "N/A",
                source=route.source if route else "Unknown",
                destination=route.destination if route else "Unknown",
            )
        )
    return trips
