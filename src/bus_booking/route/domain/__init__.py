from .entity import Route as Route
from .factory import RouteDetails as RouteDetails
from .factory import RouteFactory as RouteFactory
from .repository import RouteRepository as RouteRepository
from .value_object import RouteId as RouteId
