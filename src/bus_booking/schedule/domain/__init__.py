from .entity import Schedule as Schedule
from .enum import ScheduleStatus as ScheduleStatus
from .factory import ScheduleDetails as ScheduleDetails
from .factory import ScheduleFactory as ScheduleFactory
from .repository import ScheduleRepository as ScheduleRepository
from .value_object import ScheduleId as ScheduleId
