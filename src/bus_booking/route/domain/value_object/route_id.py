from dataclasses import dataclass
from typing import ClassVar

from bus_booking.shared.domain import EntityId


@dataclass(frozen=True)
class RouteId(EntityId):
    """路線ID

    例: "R3F9A1C0B2E7D"
    """

    PREFIX: ClassVar[str] = "R"
