from typing import TypedDict

from bus_booking.customer.domain.entity import Customer
from bus_booking.customer.domain.value_object import CustomerId


class CustomerDetails(TypedDict):
    """顧客の入力データ構造"""

    name: str
    phone: str


class CustomerFactory:
    """顧客エンティティのファクトリ"""

    def create(self, details: CustomerDetails) -> Customer:
        """新規顧客を生成する（予約回数・割引率は 0 で開始）"""
        return Customer(
            id=CustomerId.generate(),
            name=details["name"],
            phone=details["phone"],
            lifetime_bookings=0,
            loyalty_discount=0.0,
        )
