from .bus_factory import BusDetails as BusDetails
from .bus_factory import BusFactory as BusFactory
