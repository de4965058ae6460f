from dataclasses import dataclass
from typing import ClassVar

from bus_booking.shared.domain import EntityId


@dataclass(frozen=True)
class CustomerId(EntityId):
    """顧客ID"""

    PREFIX: ClassVar[str] = "CUST"
