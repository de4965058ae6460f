from pydantic import BaseModel, Field


class AddBusRequest(BaseModel):
    """バス追加リクエストスキーマ"""

    name: str = Field(..., min_length=1, description="運行会社名")
    seat_type: str = Field(default="AC Seater", examples=["AC Seater"])
    total_seats: int = Field(default=24, gt=0)
    amenities: list[str] = Field(
        default_factory=list,
        examples=[["AC", "Water Bottle", "Blanket", "Charging Point", "WiFi", "TV"]],
    )
