from .schedule import Schedule as Schedule
