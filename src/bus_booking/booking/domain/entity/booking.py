from bus_booking.booking.domain.enum import BookingStatus
from bus_booking.booking.domain.value_object import BookingId, Passenger, PaymentId
from bus_booking.customer.domain.value_object import CustomerId
from bus_booking.schedule.domain.value_object import ScheduleId
from bus_booking.shared.domain import Entity
from bus_booking.shared.domain.exception import BusinessRuleViolationException

MAX_SEATS_PER_BOOKING = 6


class Booking(Entity[BookingId]):
    """座席予約エンティティ

    Confirmed で作成され、以後の状態遷移は Cancelled（終端）のみ。
    物理削除は行わない。
    """

    def __init__(
        self,
        id: BookingId,
        schedule_id: ScheduleId,
        customer_id: CustomerId,
        seats_booked: tuple[str, ...],
        total_fare: int,
        customer_name: str = "",
        travel_origin: str = "",
        travel_destination: str = "",
        passengers: tuple[Passenger, ...] = (),
        status: BookingStatus = BookingStatus.CONFIRMED,
        payment_status: str | None = None,
        payment_id: PaymentId | None = None,
        booked_at: str | None = None,
    ) -> None:
        super().__init__(id)
        self._schedule_id = schedule_id
        self._customer_id = customer_id
        self._seats_booked = tuple(seats_booked)
        self._total_fare = total_fare
        self._customer_name = customer_name
        self._travel_origin = travel_origin
        self._travel_destination = travel_destination
        self._passengers = tuple(passengers)
        self._status = status
        self._payment_status = payment_status
        self._payment_id = payment_id
        self._booked_at = booked_at

        self._validate()

    def _validate(self) -> None:
        if len(set(self._seats_booked)) != len(self._seats_booked):
            raise BusinessRuleViolationException(
                f"Seat labels must be unique within a booking: {self._seats_booked}"
            )
        if self._total_fare < 0:
            raise BusinessRuleViolationException("Total fare cannot be negative")

    @property
    def schedule_id(self) -> ScheduleId:
        return self._schedule_id

    @property
    def customer_id(self) -> CustomerId:
        return self._customer_id

    @property
    def seats_booked(self) -> tuple[str, ...]:
        return self._seats_booked

    @property
    def seat_count(self) -> int:
        return len(self._seats_booked)

    @property
    def total_fare(self) -> int:
        return self._total_fare

    @property
    def customer_name(self) -> str:
        return self._customer_name

    @property
    def travel_origin(self) -> str:
        return self._travel_origin

    @property
    def travel_destination(self) -> str:
        return self._travel_destination

    @property
    def passengers(self) -> tuple[Passenger, ...]:
        return self._passengers

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def payment_status(self) -> str | None:
        return self._payment_status

    @property
    def payment_id(self) -> PaymentId | None:
        return self._payment_id

    @property
    def booked_at(self) -> str | None:
        return self._booked_at

    @property
    def is_active(self) -> bool:
        """座席を占有している（キャンセルされていない）か"""
        return self._status != BookingStatus.CANCELLED

    def confirm(self) -> None:
        """予約を確定する"""
        if self._status == BookingStatus.CANCELLED:
            raise BusinessRuleViolationException("Cannot confirm a cancelled booking")
        self._status = BookingStatus.CONFIRMED

    def cancel(self) -> None:
        """予約をキャンセルする（キャンセル済みなら何もしない）"""
        if self._status == BookingStatus.CANCELLED:
            return
        self._status = BookingStatus.CANCELLED
