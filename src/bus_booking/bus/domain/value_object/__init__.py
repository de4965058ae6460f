from .bus_id import BusId as BusId
