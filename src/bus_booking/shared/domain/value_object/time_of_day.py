from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

MINUTES_PER_DAY = 24 * 60


@dataclass(frozen=True)
class TimeOfDay:
    """時刻（HH:MM, 24時間表記）

    日付を持たないため、加算結果は 24 時間で折り返す。
    """

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^(\d{1,2}):(\d{2})$")

    value: str

    def __post_init__(self) -> None:
        match = self.PATTERN.match(self.value.strip())
        if not match:
            raise ValueError(f"Invalid time format: {self.value}. Expected HH:MM")
        hours, minutes = int(match.group(1)), int(match.group(2))
        if hours > 23 or minutes > 59:
            raise ValueError(f"Time out of range: {self.value}")
        object.__setattr__(self, "value", f"{hours:02d}:{minutes:02d}")

    def __str__(self) -> str:
        return self.value

    @property
    def hours(self) -> int:
        return int(self.value[:2])

    @property
    def minutes(self) -> int:
        return int(self.value[3:])

    def plus(self, hours: int = 0, minutes: int = 0) -> TimeOfDay:
        """時間を加算する（日付の繰り上がりは追跡しない）"""
        total = (self.hours * 60 + self.minutes + hours * 60 + minutes) % MINUTES_PER_DAY
        return TimeOfDay(f"{total // 60:02d}:{total % 60:02d}")
