from __future__ import annotations

from pydantic import BaseModel

from bus_booking.route.domain.entity import Route


class RouteData(BaseModel):
    """路線データのレスポンスモデル"""

    route_id: str
    source: str
    destination: str
    distance: int | None
    duration: str
    base_fare: int


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: RouteData


def to_response(route: Route) -> dict:
    """Route エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(
        data=RouteData(
            route_id=str(route.id),
            source=route.source,
            destination=route.destination,
            distance=route.distance,
            duration=str(route.duration),
            base_fare=route.base_fare,
        )
    ).model_dump()
