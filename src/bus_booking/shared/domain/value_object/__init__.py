from .deletion_result import DeletionResult as DeletionResult
from .deletion_result import IntegrityConflict as IntegrityConflict
from .entity_id import EntityId as EntityId
from .time_of_day import TimeOfDay as TimeOfDay
from .travel_duration import TravelDuration as TravelDuration
