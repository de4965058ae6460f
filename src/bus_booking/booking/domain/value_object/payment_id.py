from dataclasses import dataclass
from typing import ClassVar

from bus_booking.shared.domain import EntityId


@dataclass(frozen=True)
class PaymentId(EntityId):
    """決済ID（決済確定時に採番する）"""

    PREFIX: ClassVar[str] = "PAY_"
