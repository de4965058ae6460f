from dataclasses import dataclass, field

from bus_booking.booking.domain.repository import BookingRepository
from bus_booking.bus.domain.repository import BusRepository
from bus_booking.customer.domain.repository import CustomerRepository
from bus_booking.reporting.domain import (
    DashboardStats,
    RoutePerformance,
    TripSummary,
    dashboard_stats,
    top_routes,
    trip_summaries,
)
from bus_booking.route.domain.repository import RouteRepository
from bus_booking.schedule.domain.repository import ScheduleRepository


@dataclass
class DashboardOverview:
    """管理画面に表示する集計一式"""

    stats: DashboardStats
    top_routes: list[RoutePerformance] = field(default_factory=list)
    trip_summaries: list[TripSummary] = field(default_factory=list)


class DashboardService:
    """管理画面の集計を行うユースケース（読み取りのみ）"""

    def __init__(
        self,
        route_repository: RouteRepository,
        bus_repository: BusRepository,
        schedule_repository: ScheduleRepository,
        booking_repository: BookingRepository,
        customer_repository: CustomerRepository,
    ) -> None:
        self._route_repository = route_repository
        self._bus_repository = bus_repository
        self._schedule_repository = schedule_repository
        self._booking_repository = booking_repository
        self._customer_repository = customer_repository

    def stats(self) -> DashboardStats:
        """集計値のみを返す"""
        return dashboard_stats(
            routes=self._route_repository.find_all(),
            buses=self._bus_repository.find_all(),
            schedules=self._schedule_repository.find_all(),
            bookings=self._booking_repository.find_all(),
            customer_count=len(self._customer_repository.find_all()),
        )

    def overview(self) -> DashboardOverview:
        """集計値・売上上位区間・便ごとの予約状況を返す"""
        routes = self._route_repository.find_all()
        buses = self._bus_repository.find_all()
        schedules = self._schedule_repository.find_all()
        bookings = self._booking_repository.find_all()

        return DashboardOverview(
            stats=dashboard_stats(
                routes,
                buses,
                schedules,
                bookings,
                customer_count=len(self._customer_repository.find_all()),
            ),
            top_routes=top_routes(routes, schedules, bookings, buses),
            trip_summaries=trip_summaries(schedules, routes, buses, bookings),
        )
