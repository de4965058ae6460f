from typing import TypedDict

from bus_booking.booking.domain.entity import Booking
from bus_booking.booking.domain.enum import BookingStatus
from bus_booking.booking.domain.value_object import BookingId, Passenger, PaymentId
from bus_booking.customer.domain.value_object import CustomerId
from bus_booking.schedule.domain.value_object import ScheduleId

GUEST_CUSTOMER_ID = "GUEST"


class PassengerDetails(TypedDict, total=False):
    """乗客情報の入力データ構造"""

    name: str
    age: int | None
    gender: str
    seat_number: str


class BookingDetails(TypedDict, total=False):
    """予約の入力データ構造

    booking_id があれば既存予約への部分更新、なければ新規作成として扱う。
    """

    booking_id: str
    schedule_id: str
    customer_id: str
    customer_name: str
    travel_origin: str
    travel_destination: str
    seats_booked: list[str]
    total_fare: int
    passenger_details: list[PassengerDetails]
    status: str
    payment_status: str
    payment_id: str
    booked_at: str


class BookingFactory:
    """座席予約エンティティのファクトリ

    - 新規予約の ID 採番
    - 既存予約への部分更新（指定されたフィールドだけを上書き）
    """

    def create(self, details: BookingDetails) -> Booking:
        """新規予約エンティティを生成する

        Args:
            details: 予約の入力データ（schedule_id, seats_booked, total_fare は必須）

        Returns:
            Booking: 生成された予約エンティティ
        """
        return Booking(
            id=BookingId.generate(),
            schedule_id=ScheduleId(value=details["schedule_id"]),
            customer_id=CustomerId(
                value=details.get("customer_id") or GUEST_CUSTOMER_ID
            ),
            seats_booked=tuple(details["seats_booked"]),
            total_fare=details["total_fare"],
            customer_name=details.get("customer_name", ""),
            travel_origin=details.get("travel_origin", ""),
            travel_destination=details.get("travel_destination", ""),
            passengers=_to_passengers(details.get("passenger_details", [])),
            status=BookingStatus(details.get("status", BookingStatus.CONFIRMED)),
            payment_status=details.get("payment_status"),
            payment_id=_to_payment_id(details.get("payment_id")),
            booked_at=details.get("booked_at"),
        )

    def merge(self, existing: Booking, details: BookingDetails) -> Booking:
        """既存予約に入力データを上書きした予約エンティティを返す

        ID は変更しない。キャンセル済みの予約を再度確定状態に戻すことはできない。

        Raises:
            BusinessRuleViolationException: キャンセル済み予約を確定しようとした場合
        """
        merged = Booking(
            id=existing.id,
            schedule_id=(
                ScheduleId(value=details["schedule_id"])
                if "schedule_id" in details
                else existing.schedule_id
            ),
            customer_id=(
                CustomerId(value=details["customer_id"])
                if details.get("customer_id")
                else existing.customer_id
            ),
            seats_booked=tuple(details.get("seats_booked", existing.seats_booked)),
            total_fare=details.get("total_fare", existing.total_fare),
            customer_name=details.get("customer_name", existing.customer_name),
            travel_origin=details.get("travel_origin", existing.travel_origin),
            travel_destination=details.get(
                "travel_destination", existing.travel_destination
            ),
            passengers=(
                _to_passengers(details["passenger_details"])
                if "passenger_details" in details
                else existing.passengers
            ),
            status=existing.status,
            payment_status=details.get("payment_status", existing.payment_status),
            payment_id=(
                _to_payment_id(details["payment_id"])
                if "payment_id" in details
                else existing.payment_id
            ),
            booked_at=details.get("booked_at", existing.booked_at),
        )

        if "status" in details:
            status = BookingStatus(details["status"])
            if status == BookingStatus.CANCELLED:
                merged.cancel()
            else:
                merged.confirm()
        return merged


def _to_passengers(passenger_details: list[PassengerDetails]) -> tuple[Passenger, ...]:
    return tuple(
        Passenger(
            name=p.get("name", ""),
            seat_number=p.get("seat_number", ""),
            age=p.get("age"),
            gender=p.get("gender", ""),
        )
        for p in passenger_details
    )


def _to_payment_id(value: str | None) -> PaymentId | None:
    return PaymentId(value=value) if value else None
