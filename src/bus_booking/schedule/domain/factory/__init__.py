from .schedule_factory import ScheduleDetails as ScheduleDetails
from .schedule_factory import ScheduleFactory as ScheduleFactory
