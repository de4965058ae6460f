from __future__ import annotations

from pydantic import BaseModel

from bus_booking.booking.domain.entity import Booking


class PassengerData(BaseModel):
    """乗客データのレスポンスモデル"""

    name: str
    age: int | None
    gender: str
    seat_number: str


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: str
    schedule_id: str
    customer_id: str
    customer_name: str
    travel_origin: str
    travel_destination: str
    seats_booked: list[str]
    total_fare: int
    passenger_details: list[PassengerData]
    status: str
    payment_status: str | None
    payment_id: str | None
    booked_at: str | None


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: BookingData


def to_response(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(
        data=BookingData(
            booking_id=str(booking.id),
            schedule_id=str(booking.schedule_id),
            customer_id=str(booking.customer_id),
            customer_name=booking.customer_name,
            travel_origin=booking.travel_origin,
            travel_destination=booking.travel_destination,
            seats_booked=list(booking.seats_booked),
            total_fare=booking.total_fare,
            passenger_details=[
                PassengerData(
                    name=p.name, age=p.age, gender=p.gender, seat_number=p.seat_number
                )
                for p in booking.passengers
            ],
            status=booking.status.value,
            payment_status=booking.payment_status,
            payment_id=str(booking.payment_id) if booking.payment_id else None,
            booked_at=booking.booked_at,
        )
    ).model_dump()
