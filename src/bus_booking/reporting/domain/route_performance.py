from dataclasses import dataclass

from bus_booking.booking.domain.entity import Booking
from bus_booking.bus.domain.entity import Bus
from bus_booking.reporting.domain.seat_availability import bus_capacity
from bus_booking.route.domain.entity import Route
from bus_booking.schedule.domain.entity import Schedule


@dataclass
class RoutePerformance:
    """区間（出発地 ➝ 到着地）ごとの集計"""

    source: str
    destination: str
    revenue: int = 0
    bookings: int = 0
    seats_booked: int = 0
    schedules: int = 0
    total_seats: int = 0

    @property
    def label(self) -> str:
        return f"{self.source} ➝ {self.destination}"


def route_performance(
    routes: list[Route],
    schedules: list[Schedule],
    bookings: list[Booking],
    buses: list[Bus],
) -> list[RoutePerformance]:
    """スケジュールを区間ごとにまとめ、売上の降順で返す

    キャンセル済みの予約は売上・予約数・座席数に含めない。
    路線が見つからないスケジュールは集計しない。
    """
    routes_by_id = {route.id: route for route in routes}
    groups: dict[tuple[str, str], RoutePerformance] = {}

    for schedule in schedules:
        route = routes_by_id.get(schedule.route_id)
        if route is None:
            continue

        key = (route.source, route.destination)
        performance = groups.setdefault(
            key, RoutePerformance(source=route.source, destination=route.destination)
        )
        active = [
            b for b in bookings if b.schedule_id == schedule.id and b.is_active
        ]
        performance.revenue += sum(b.total_fare for b in active)
        performance.bookings += len(active)
        performance.seats_booked += sum(b.seat_count for b in active)
        performance.schedules += 1
        performance.total_seats += bus_capacity(schedule.bus_id, buses)

    return sorted(groups.values(), key=lambda p: p.revenue, reverse=True)


def top_routes(
    routes: list[Route],
    schedules: list[Schedule],
    bookings: list[Booking],
    buses: list[Bus],
    limit: int = 3,
) -> list[RoutePerformance]:
    """売上上位の区間"""
    return route_performance(routes, schedules, bookings, buses)[:limit]
