from dataclasses import dataclass, field

from bus_booking.booking.domain.entity import Booking
from bus_booking.bus.domain.entity import Bus
from bus_booking.reporting.domain.route_performance import top_routes
from bus_booking.route.domain.entity import Route
from bus_booking.schedule.domain.entity import Schedule

RECENT_BOOKINGS_LIMIT = 5


@dataclass
class DashboardStats:
    """管理画面の集計値"""

    total_transactions: int
    revenue: int
    bookings: int
    cancelled: int
    buses: int
    routes: int
    schedules: int
    customers: int
    top_route: str | None
    recent_bookings: list[Booking] = field(default_factory=list)


def dashboard_stats(
    routes: list[Route],
    buses: list[Bus],
    schedules: list[Schedule],
    bookings: list[Booking],
    customer_count: int = 0,
) -> DashboardStats:
    """管理画面の集計値を算出する

    total_transactions はキャンセル済みを含む全予約の合計、
    revenue はキャンセル済みを除いた合計。
    """
    best = top_routes(routes, schedules, bookings, buses, limit=1)
    return DashboardStats(
        total_transactions=sum(b.total_fare for b in bookings),
        revenue=sum(b.total_fare for b in bookings if b.is_active),
        bookings=len(bookings),
        cancelled=sum(1 for b in bookings if not b.is_active),
        buses=len(buses),
        routes=len(routes),
        schedules=len(schedules),
        customers=customer_count,
        top_route=best[0].label if best else None,
        recent_bookings=list(reversed(bookings))[:RECENT_BOOKINGS_LIMIT],
    )
