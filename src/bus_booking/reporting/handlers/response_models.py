from __future__ import annotations

from pydantic import BaseModel

from bus_booking.listing import Page
from bus_booking.reporting.applications.dashboard import DashboardOverview
from bus_booking.reporting.applications.seat_map import SeatMap
from bus_booking.reporting.domain import CustomerTrip, TripOption


class StatsData(BaseModel):
    """集計値のレスポンスモデル"""

    total_transactions: int
    revenue: int
    bookings: int
    cancelled: int
    buses: int
    routes: int
    schedules: int
    customers: int
    top_route: str | None
    recent_booking_ids: list[str]


class RoutePerformanceData(BaseModel):
    """区間別集計のレスポンスモデル"""

    label: str
    revenue: int
    bookings: int
    seats_booked: int
    schedules: int
    total_seats: int


class TripSummaryData(BaseModel):
    """便ごとの予約状況のレスポンスモデル"""

    schedule_id: str
    route_label: str
    date: str
    time: str
    bus_name: str
    occupancy: str
    revenue: int
    booking_ids: list[str]


class DashboardData(BaseModel):
    stats: StatsData
    top_routes: list[RoutePerformanceData]
    trip_summaries: list[TripSummaryData]


class TripOptionData(BaseModel):
    """検索結果1便のレスポンスモデル"""

    schedule_id: str
    route_id: str
    source: str
    destination: str
    duration: str
    departure_date: str
    departure_time: str
    arrival_time: str | None
    bus_id: str
    bus_name: str
    seat_type: str
    amenities: list[str]
    ticket_fare: int
    seats_available: int


class SearchData(BaseModel):
    items: list[TripOptionData]
    page: int
    page_size: int
    total_pages: int
    total_items: int


class DashboardResponse(BaseModel):
    status: str = "success"
    data: DashboardData


class SearchResponse(BaseModel):
    status: str = "success"
    data: SearchData


def to_dashboard_response(overview: DashboardOverview) -> dict:
    """DashboardOverview をレスポンス辞書に変換する"""
    stats = overview.stats
    return DashboardResponse(
        data=DashboardData(
            stats=StatsData(
                total_transactions=stats.total_transactions,
                revenue=stats.revenue,
                bookings=stats.bookings,
                cancelled=stats.cancelled,
                buses=stats.buses,
                routes=stats.routes,
                schedules=stats.schedules,
                customers=stats.customers,
                top_route=stats.top_route,
                recent_booking_ids=[str(b.id) for b in stats.recent_bookings],
            ),
            top_routes=[
                RoutePerformanceData(
                    label=p.label,
                    revenue=p.revenue,
                    bookings=p.bookings,
                    seats_booked=p.seats_booked,
                    schedules=p.schedules,
                    total_seats=p.total_seats,
                )
                for p in overview.top_routes
            ],
            trip_summaries=[
                TripSummaryData(
                    schedule_id=t.schedule_id,
                    route_label=t.route_label,
                    date=t.date,
                    time=t.time,
                    bus_name=t.bus_name,
                    occupancy=t.occupancy,
                    revenue=t.revenue,
                    booking_ids=[str(b.id) for b in t.bookings],
                )
                for t in overview.trip_summaries
            ],
        )
    ).model_dump()


def to_search_response(page: Page[TripOption]) -> dict:
    """検索結果ページをレスポンス辞書に変換する"""
    return SearchResponse(
        data=SearchData(
            items=[_to_trip_option_data(option) for option in page.items],
            page=page.page,
            page_size=page.page_size,
            total_pages=page.total_pages,
            total_items=page.total_items,
        )
    ).model_dump()


def _to_trip_option_data(option: TripOption) -> TripOptionData:
    schedule = option.schedule
    return TripOptionData(
        schedule_id=str(schedule.id),
        route_id=str(option.route.id),
        source=option.route.source,
        destination=option.route.destination,
        duration=str(option.route.duration),
        departure_date=schedule.departure_date,
        departure_time=str(schedule.departure_time),
        arrival_time=str(schedule.arrival_time) if schedule.arrival_time else None,
        bus_id=str(schedule.bus_id),
        bus_name=option.bus_name,
        seat_type=option.seat_type,
        amenities=list(option.bus.amenities) if option.bus else [],
        ticket_fare=option.ticket_fare,
        seats_available=option.seats_available,
    )


class SeatMapData(BaseModel):
    """座席状況のレスポンスモデル"""

    schedule_id: str
    seats: list[str]
    booked: list[str]
    seats_available: int
    ticket_fare: int | None


class SeatMapResponse(BaseModel):
    status: str = "success"
    data: SeatMapData


class CustomerTripData(BaseModel):
    """顧客の予約履歴1件のレスポンスモデル"""

    booking_id: str
    status: str
    seats_booked: list[str]
    total_fare: int
    date: str
    time: str
    source: str
    destination: str


class CustomerTripsResponse(BaseModel):
    status: str = "success"
    data: list[CustomerTripData]


def to_seat_map_response(seat_map: SeatMap) -> dict:
    """SeatMap をレスポンス辞書に変換する"""
    return SeatMapResponse(
        data=SeatMapData(
            schedule_id=seat_map.schedule_id,
            seats=seat_map.seats,
            booked=seat_map.booked,
            seats_available=seat_map.seats_available,
            ticket_fare=seat_map.ticket_fare,
        )
    ).model_dump()


def to_customer_trips_response(trips: list[CustomerTrip]) -> dict:
    """顧客の予約履歴をレスポンス辞書に変換する"""
    return CustomerTripsResponse(
        data=[
            CustomerTripData(
                booking_id=str(t.booking.id),
                status=t.booking.status.value,
                seats_booked=list(t.booking.seats_booked),
                total_fare=t.booking.total_fare,
                date=t.date,
                time=t.time,
                source=t.source,
                destination=t.destination,
            )
            for t in trips
        ]
    ).model_dump()
