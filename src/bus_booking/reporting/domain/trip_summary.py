from dataclasses import dataclass, field

from bus_booking.booking.domain.entity import Booking
from bus_booking.bus.domain.entity import Bus
from bus_booking.route.domain.entity import Route
from bus_booking.schedule.domain.entity import Schedule

UNKNOWN_ROUTE = "Unknown Route"
UNKNOWN_BUS = "Unknown Bus"
NOT_AVAILABLE = "N/A"


@dataclass
class TripSummary:
    """予約がある運行便ごとの一覧表示用データ"""

    schedule_id: str
    route_label: str
    date: str
    time: str
    bus_name: str
    occupancy: str
    revenue: int
    bookings: list[Booking] = field(default_factory=list)


def trip_summaries(
    schedules: list[Schedule],
    routes: list[Route],
    buses: list[Bus],
    bookings: list[Booking],
) -> list[TripSummary]:
    """予約をスケジュールごとにまとめ、路線・バス情報を結合する

    参照先が見つからない場合は "Unknown Route" / "Unknown Bus" / "N/A"、
    座席数 0 として扱う。並びは各スケジュールの最初の予約順。
    """
    groups: dict[str, list[Booking]] = {}
    for booking in bookings:
        groups.setdefault(str(booking.schedule_id), []).append(booking)

    schedules_by_id = {str(s.id): s for s in schedules}
    routes_by_id = {r.id: r for r in routes}
    buses_by_id = {b.id: b for b in buses}

    summaries = []
    for schedule_id, trip_bookings in groups.items():
        schedule = schedules_by_id.get(schedule_id)
        route = routes_by_id.get(schedule.route_id) if schedule else None
        bus = buses_by_id.get(schedule.bus_id) if schedule else None

        active = [b for b in trip_bookings if b.is_active]
        occupied = sum(b.seat_count for b in active)
        capacity = bus.total_seats if bus else 0

        summaries.append(
            TripSummary(
                schedule_id=schedule_id,
                route_label=route.label if route else UNKNOWN_ROUTE,
                date=schedule.departure_date if schedule else NOT_AVAILABLE,
                time=str(schedule.departure_time) if schedule else NOT_AVAILABLE,
                bus_name=bus.name if bus else UNKNOWN_BUS,
                occupancy=f"{occupied}/{capacity}",
                revenue=sum(b.total_fare for b in active),
                bookings=trip_bookings,
            )
        )
    return summaries
