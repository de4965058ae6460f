from .schedule_id import ScheduleId as ScheduleId
