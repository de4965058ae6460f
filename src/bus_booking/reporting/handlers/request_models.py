import datetime

from pydantic import BaseModel, Field

from bus_booking.listing import DEFAULT_PAGE_SIZE


class SearchTripsRequest(BaseModel):
    """運行便検索のクエリパラメータ"""

    source: str = Field(..., min_length=1, examples=["Chennai"])
    destination: str = Field(..., min_length=1, examples=["Madurai"])
    date: datetime.date = Field(..., description="出発日（YYYY-MM-DD）")
    search: str = Field(default="", description="バス名・座席タイプでの絞り込み")
    page: int = Field(default=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=100)
