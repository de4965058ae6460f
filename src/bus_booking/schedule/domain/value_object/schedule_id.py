from dataclasses import dataclass
from typing import ClassVar

from bus_booking.shared.domain import EntityId


@dataclass(frozen=True)
class ScheduleId(EntityId):
    """運行スケジュールID"""

    PREFIX: ClassVar[str] = "SCD"
