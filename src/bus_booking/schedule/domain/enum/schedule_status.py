from enum import Enum


class ScheduleStatus(str, Enum):
    """運行スケジュールステータス"""

    ACTIVE = "Active"
