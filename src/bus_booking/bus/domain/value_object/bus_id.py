from dataclasses import dataclass
from typing import ClassVar

from bus_booking.shared.domain import EntityId


@dataclass(frozen=True)
class BusId(EntityId):
    """バスID"""

    PREFIX: ClassVar[str] = "B"
