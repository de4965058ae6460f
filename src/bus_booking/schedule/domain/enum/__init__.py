from .schedule_status import ScheduleStatus as ScheduleStatus
