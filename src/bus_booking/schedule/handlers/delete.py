from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from bus_booking.booking.infrastructure.store_booking_repository import (
    StoreBookingRepository,
)
from bus_booking.schedule.applications.delete_schedule import DeleteScheduleService
from bus_booking.schedule.domain.value_object import ScheduleId
from bus_booking.schedule.infrastructure.store_schedule_repository import (
    StoreScheduleRepository,
)
from bus_booking.shared.infrastructure import CollectionStore, DynamoDBKeyValueStorage
from bus_booking.shared.utils import deletion_response, error_response

logger = Logger()

store = CollectionStore(DynamoDBKeyValueStorage())
service = DeleteScheduleService(
    repository=StoreScheduleRepository(store),
    booking_repository=StoreBookingRepository(store),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """運行スケジュール削除 Lambda Handler"""
    schedule_id = ((event.path_parameters or {}).get("schedule_id") or "").strip()
    if not schedule_id:
        return error_response(400, "schedule_id is required")

    logger.info("Received delete schedule request", extra={"schedule_id": schedule_id})
    result = service.delete(ScheduleId(value=schedule_id))
    return deletion_response(result, schedule_id)
