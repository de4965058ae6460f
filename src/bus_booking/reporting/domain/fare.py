from bus_booking.route.domain.entity import Route
from bus_booking.schedule.domain.entity import Schedule
from bus_booking.shared.utils import round_half_up, to_decimal


def ticket_fare(route: Route, schedule: Schedule) -> int:
    """1席あたりの運賃（基本運賃 × 運賃倍率を四捨五入）"""
    return round_half_up(to_decimal(route.base_fare) * to_decimal(schedule.fare_multiplier))


def total_fare(route: Route, schedule: Schedule, seat_count: int) -> int:
    """選択座席数分の合計運賃"""
    return ticket_fare(route, schedule) * seat_count
