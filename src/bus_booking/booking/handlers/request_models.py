from pydantic import BaseModel, Field

from bus_booking.booking.domain.entity import MAX_SEATS_PER_BOOKING


class PassengerRequest(BaseModel):
    """乗客情報スキーマ"""

    name: str = Field(..., min_length=1)
    age: int | None = Field(default=None, ge=0, le=120)
    gender: str = Field(default="", examples=["Male", "Female", "Other"])
    seat_number: str = Field(..., min_length=1, examples=["1A"])


class ConfirmBookingRequest(BaseModel):
    """決済確定リクエストスキーマ"""

    schedule_id: str = Field(..., min_length=1, examples=["SCD3001"])
    customer_id: str | None = Field(default=None, examples=["CUST5001"])
    customer_name: str = Field(default="")
    travel_origin: str = Field(default="", examples=["Chennai"])
    travel_destination: str = Field(default="", examples=["Madurai"])
    seats_booked: list[str] = Field(
        ..., min_length=1, max_length=MAX_SEATS_PER_BOOKING, examples=[["1A", "1B"]]
    )
    total_fare: int = Field(..., ge=0, description="合計運賃")
    passenger_details: list[PassengerRequest] = Field(default_factory=list)
    payment_succeeded: bool = Field(default=True, description="決済結果")
