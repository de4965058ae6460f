from pydantic import field_validator

from bus_booking.booking.domain.entity import Booking
from bus_booking.booking.domain.enum import BookingStatus
from bus_booking.booking.domain.repository import BookingRepository
from bus_booking.booking.domain.value_object import BookingId, Passenger, PaymentId
from bus_booking.customer.domain.value_object import CustomerId
from bus_booking.schedule.domain.value_object import ScheduleId
from bus_booking.shared.infrastructure import CollectionRepository, StoredRecord
from bus_booking.shared.utils import blank_to_none


class PassengerRecord(StoredRecord):
    """passengerDetails 要素の保存形式"""

    name: str = ""
    age: int | None = None
    gender: str = ""
    seat_number: str = ""

    @field_validator("age", mode="before")
    @classmethod
    def blank_age_to_none(cls, v):
        return blank_to_none(v)


class BookingRecord(StoredRecord):
    """bookings コレクションの保存形式"""

    booking_id: str
    schedule_id: str
    customer_id: str
    customer_name: str = ""
    travel_origin: str = ""
    travel_destination: str = ""
    seats_booked: list[str] = []
    total_fare: int = 0
    passenger_details: list[PassengerRecord] = []
    status: BookingStatus = BookingStatus.CONFIRMED
    payment_status: str | None = None
    payment_id: str | None = None
    booked_at: str | None = None


class StoreBookingRepository(
    CollectionRepository[Booking, BookingRecord], BookingRepository
):
    """CollectionStore を使用した BookingRepository の具象実装"""

    collection_name = "bookings"
    record_model = BookingRecord

    def find_by_schedule_id(self, schedule_id: ScheduleId) -> list[Booking]:
        return [b for b in self._load() if b.schedule_id == schedule_id]

    def find_by_customer_id(self, customer_id: CustomerId) -> list[Booking]:
        return [b for b in self._load() if b.customer_id == customer_id]

    def update(self, booking: Booking) -> None:
        """予約を同じ位置で置き換える"""
        self._replace(booking)

    def _to_entity(self, record: BookingRecord) -> Booking:
        return Booking(
            id=BookingId(value=record.booking_id),
            schedule_id=ScheduleId(value=record.schedule_id),
            customer_id=CustomerId(value=record.customer_id),
            seats_booked=tuple(record.seats_booked),
            total_fare=record.total_fare,
            customer_name=record.customer_name,
            travel_origin=record.travel_origin,
            travel_destination=record.travel_destination,
            passengers=tuple(
                Passenger(
                    name=p.name, seat_number=p.seat_number, age=p.age, gender=p.gender
                )
                for p in record.passenger_details
            ),
            status=record.status,
            payment_status=record.payment_status,
            payment_id=PaymentId(value=record.payment_id) if record.payment_id else None,
            booked_at=record.booked_at,
        )

    def _to_record(self, booking: Booking) -> BookingRecord:
        return BookingRecord(
            booking_id=str(booking.id),
            schedule_id=str(booking.schedule_id),
            customer_id=str(booking.customer_id),
            customer_name=booking.customer_name,
            travel_origin=booking.travel_origin,
            travel_destination=booking.travel_destination,
            seats_booked=list(booking.seats_booked),
            total_fare=booking.total_fare,
            passenger_details=[
                PassengerRecord(
                    name=p.name, age=p.age, gender=p.gender, seat_number=p.seat_number
                )
                for p in booking.passengers
            ],
            status=booking.status,
            payment_status=booking.payment_status,
            payment_id=str(booking.payment_id) if booking.payment_id else None,
            booked_at=booking.booked_at,
        )
