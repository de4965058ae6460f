from .bus import DEFAULT_BUS_CAPACITY as DEFAULT_BUS_CAPACITY
from .bus import Bus as Bus
