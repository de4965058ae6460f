import re
from dataclasses import dataclass, field
from typing import ClassVar


@dataclass(frozen=True)
class TravelDuration:
    """所要時間

    "<H>h" または "<H>h <M>m" の形式。
    例: "8h", "3h 45m"
    """

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^(\d+)h( (\d+)m)?$")

    value: str
    hours: int = field(init=False, repr=False, compare=False)
    minutes: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        normalized = self.value.strip()
        match = self.PATTERN.match(normalized)
        if not match:
            raise ValueError(
                f"Invalid duration format: {self.value}. Use '8h' or '8h 30m'"
            )
        object.__setattr__(self, "value", normalized)
        object.__setattr__(self, "hours", int(match.group(1)))
        object.__setattr__(self, "minutes", int(match.group(3) or 0))

    def __str__(self) -> str:
        return self.value
