from .entity import DEFAULT_BUS_CAPACITY as DEFAULT_BUS_CAPACITY
from .entity import Bus as Bus
from .factory import BusDetails as BusDetails
from .factory import BusFactory as BusFactory
from .repository import BusRepository as BusRepository
from .value_object import BusId as BusId
