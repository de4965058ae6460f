from .entity import Entity as Entity
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exception import (
    SeatUnavailableException as SeatUnavailableException,
)
from .repository import Repository as Repository
from .value_object import (
    DeletionResult as DeletionResult,
)
from .value_object import (
    EntityId as EntityId,
)
from .value_object import (
    IntegrityConflict as IntegrityConflict,
)
from .value_object import (
    TimeOfDay as TimeOfDay,
)
from .value_object import (
    TravelDuration as TravelDuration,
)
