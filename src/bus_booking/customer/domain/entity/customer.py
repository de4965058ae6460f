from bus_booking.customer.domain.value_object import CustomerId
from bus_booking.shared.domain import Entity


class Customer(Entity[CustomerId]):
    """顧客エンティティ（追記のみで更新・削除はしない）"""

    def __init__(
        self,
        id: CustomerId,
        name: str,
        phone: str,
        lifetime_bookings: int = 0,
        loyalty_discount: float = 0.0,
    ) -> None:
        super().__init__(id)
        self._name = name.strip()
        self._phone = phone.strip()
        self._lifetime_bookings = lifetime_bookings
        self._loyalty_discount = loyalty_discount

        if not self._name:
            raise ValueError("Customer name cannot be empty")
        if not self._phone:
            raise ValueError("Customer phone cannot be empty")

    @property
    def name(self) -> str:
        return self._name

    @property
    def phone(self) -> str:
        return self._phone

    @property
    def lifetime_bookings(self) -> int:
        return self._lifetime_bookings

    @property
    def loyalty_discount(self) -> float:
        return self._loyalty_discount

    def matches_login(self, username: str) -> bool:
        """名前（大文字小文字を区別しない）または電話番号が一致するか"""
        return (
            self._name.lower() == username.strip().lower()
            or self._phone == username.strip()
        )
