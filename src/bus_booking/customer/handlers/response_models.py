from __future__ import annotations

from pydantic import BaseModel

from bus_booking.customer.domain.entity import Customer


class CustomerData(BaseModel):
    """顧客データのレスポンスモデル"""

    customer_id: str
    name: str
    phone: str
    lifetime_bookings: int
    loyalty_discount: float


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    message: str
    data: CustomerData


def to_response(customer: Customer, message: str) -> dict:
    """Customer エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(
        message=message,
        data=CustomerData(
            customer_id=str(customer.id),
            name=customer.name,
            phone=customer.phone,
            lifetime_bookings=customer.lifetime_bookings,
            loyalty_discount=customer.loyalty_discount,
        ),
    ).model_dump()
