from __future__ import annotations

from pydantic import BaseModel

from bus_booking.schedule.domain.entity import Schedule


class ScheduleData(BaseModel):
    """運行スケジュールデータのレスポンスモデル"""

    schedule_id: str
    route_id: str
    bus_id: str
    departure_date: str
    departure_time: str
    arrival_time: str | None
    fare_multiplier: float
    status: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: list[ScheduleData]


def to_response(schedules: list[Schedule]) -> dict:
    """Schedule エンティティのリストをレスポンス辞書に変換する"""
    return SuccessResponse(
        data=[
            ScheduleData(
                schedule_id=str(s.id),
                route_id=str(s.route_id),
                bus_id=str(s.bus_id),
                departure_date=s.departure_date,
                departure_time=str(s.departure_time),
                arrival_time=str(s.arrival_time) if s.arrival_time else None,
                fare_multiplier=s.fare_multiplier,
                status=s.status.value,
            )
            for s in schedules
        ]
    ).model_dump()
