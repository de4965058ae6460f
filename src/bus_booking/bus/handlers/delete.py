from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from bus_booking.bus.applications.delete_bus import DeleteBusService
from bus_booking.bus.domain.value_object import BusId
from bus_booking.bus.infrastructure.store_bus_repository import StoreBusRepository
from bus_booking.schedule.infrastructure.store_schedule_repository import (
    StoreScheduleRepository,
)
from bus_booking.shared.infrastructure import CollectionStore, DynamoDBKeyValueStorage
from bus_booking.shared.utils import deletion_response, error_response

logger = Logger()

store = CollectionStore(DynamoDBKeyValueStorage())
service = DeleteBusService(
    repository=StoreBusRepository(store),
    schedule_repository=StoreScheduleRepository(store),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """バス削除 Lambda Handler"""
    bus_id = ((event.path_parameters or {}).get("bus_id") or "").strip()
    if not bus_id:
        return error_response(400, "bus_id is required")

    logger.info("Received delete bus request", extra={"bus_id": bus_id})
    return deletion_response(service.delete(BusId(value=bus_id)), bus_id)
