from bus_booking.booking.domain.entity import Booking
from bus_booking.bus.domain.entity import DEFAULT_BUS_CAPACITY, Bus
from bus_booking.bus.domain.value_object import BusId
from bus_booking.schedule.domain.entity import Schedule
from bus_booking.schedule.domain.value_object import ScheduleId

SEAT_ROWS = 8
SEAT_COLUMNS = ("A", "B", "C")


def seat_labels(rows: int = SEAT_ROWS) -> list[str]:
    """座席ラベルを列挙する（1A, 1B, 1C, 2A, ...）"""
    return [f"{row}{column}" for row in range(1, rows + 1) for column in SEAT_COLUMNS]


def bus_capacity(bus_id: BusId, buses: list[Bus]) -> int:
    """バスの座席数。バスが見つからない場合は既定値を返す"""
    bus = next((b for b in buses if b.id == bus_id), None)
    return bus.total_seats if bus else DEFAULT_BUS_CAPACITY


def booked_seats(schedule_id: ScheduleId, bookings: list[Booking]) -> list[str]:
    """スケジュール上で有効な予約が占有している座席ラベル"""
    return [
        seat
        for booking in bookings
        if booking.schedule_id == schedule_id and booking.is_active
        for seat in booking.seats_booked
    ]


def seats_available(
    schedule: Schedule, buses: list[Bus], bookings: list[Booking]
) -> int:
    """空席数（0 未満にはならない）"""
    taken = len(booked_seats(schedule.id, bookings))
    return max(0, bus_capacity(schedule.bus_id, buses) - taken)
