from .exceptions import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exceptions import DomainException as DomainException
from .exceptions import DuplicateResourceException as DuplicateResourceException
from .exceptions import ResourceNotFoundException as ResourceNotFoundException
from .exceptions import SeatUnavailableException as SeatUnavailableException
