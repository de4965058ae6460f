import re
from dataclasses import dataclass

from bus_booking.booking.domain.entity import Booking
from bus_booking.bus.domain.entity import Bus
from bus_booking.reporting.domain.fare import ticket_fare
from bus_booking.reporting.domain.seat_availability import seats_available
from bus_booking.route.domain.entity import Route
from bus_booking.schedule.domain.entity import Schedule

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class TripOption:
    """検索結果の1便"""

    schedule: Schedule
    route: Route
    bus: Bus | None
    ticket_fare: int
    seats_available: int

    @property
    def bus_name(self) -> str:
        return self.bus.name if self.bus else ""

    @property
    def seat_type(self) -> str:
        return self.bus.seat_type if self.bus else ""


def _normalize(text: str | None) -> str:
    return _WHITESPACE.sub("", text).lower() if text else ""


def search_trips(
    source: str | None,
    destination: str | None,
    departure_date: str | None,
    schedules: list[Schedule],
    routes: list[Route],
    buses: list[Bus],
    bookings: list[Booking],
) -> list[TripOption]:
    """出発地・到着地・出発日で運行便を検索する

    都市名は空白を除いた小文字の部分一致、出発日は完全一致。
    3条件のいずれかが欠けていれば空リストを返す。
    """
    if not source or not destination or not departure_date:
        return []

    wanted_source = _normalize(source)
    wanted_destination = _normalize(destination)
    routes_by_id = {r.id: r for r in routes}
    buses_by_id = {b.id: b for b in buses}

    options = []
    for schedule in schedules:
        route = routes_by_id.get(schedule.route_id)
        if route is None:
            continue
        if (
            wanted_source in _normalize(route.source)
            and wanted_destination in _normalize(route.destination)
            and schedule.departure_date == departure_date
        ):
            options.append(
                TripOption(
                    schedule=schedule,
                    route=route,
                    bus=buses_by_id.get(schedule.bus_id),
                    ticket_fare=ticket_fare(route, schedule),
                    seats_available=seats_available(schedule, buses, bookings),
                )
            )
    return options


def list_cities(routes: list[Route]) -> list[str]:
    """路線に登場する都市名（重複なし・昇順）"""
    return sorted({r.source for r in routes} | {r.destination for r in routes})
