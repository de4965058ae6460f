from datetime import date

from pydantic import BaseModel, Field


class AddScheduleRequest(BaseModel):
    """運行スケジュール追加リクエストスキーマ"""

    route_id: str = Field(..., min_length=1, examples=["R1001"])
    bus_id: str = Field(..., min_length=1, examples=["B2001"])
    departure_date: date = Field(..., description="出発日（YYYY-MM-DD）")
    departure_time: str = Field(
        ..., pattern=r"^([01]?\d|2[0-3]):[0-5]\d$", description="出発時刻", examples=["21:30"]
    )
    fare_multiplier: float = Field(default=1.0, gt=0, description="運賃倍率")
    repeat_days: int = Field(
        default=1, ge=1, le=90, description="出発日から連続で登録する日数"
    )
