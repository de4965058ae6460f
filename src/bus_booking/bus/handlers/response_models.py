from __future__ import annotations

from pydantic import BaseModel

from bus_booking.bus.domain.entity import Bus


class BusData(BaseModel):
    """バスデータのレスポンスモデル"""

    bus_id: str
    name: str
    seat_type: str
    total_seats: int
    amenities: list[str]


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: BusData


def to_response(bus: Bus) -> dict:
    """Bus エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(
        data=BusData(
            bus_id=str(bus.id),
            name=bus.name,
            seat_type=bus.seat_type,
            total_seats=bus.total_seats,
            amenities=list(bus.amenities),
        )
    ).model_dump()
