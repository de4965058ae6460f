from dataclasses import dataclass
from typing import ClassVar

from bus_booking.shared.domain import EntityId


@dataclass(frozen=True)
class BookingId(EntityId):
    """予約ID"""

    PREFIX: ClassVar[str] = "BK"
