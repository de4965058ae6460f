from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from bus_booking.bus.infrastructure.store_bus_repository import StoreBusRepository
from bus_booking.route.infrastructure.store_route_repository import (
    StoreRouteRepository,
)
from bus_booking.schedule.applications.add_schedule import AddScheduleService
from bus_booking.schedule.domain.factory import ScheduleDetails, ScheduleFactory
from bus_booking.schedule.handlers.request_models import AddScheduleRequest
from bus_booking.schedule.handlers.response_models import to_response
from bus_booking.schedule.infrastructure.store_schedule_repository import (
    StoreScheduleRepository,
)
from bus_booking.shared.domain import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)
from bus_booking.shared.infrastructure import CollectionStore, DynamoDBKeyValueStorage
from bus_booking.shared.utils import api_response, error_response

logger = Logger()

store = CollectionStore(DynamoDBKeyValueStorage())
service = AddScheduleService(
    repository=StoreScheduleRepository(store),
    route_repository=StoreRouteRepository(store),
    bus_repository=StoreBusRepository(store),
    factory=ScheduleFactory(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """運行スケジュール追加 Lambda Handler

    repeat_days を指定すると出発日から連続する日付分をまとめて登録する。
    """
    logger.info("Received add schedule request")

    try:
        request = AddScheduleRequest.model_validate_json(event.body or "{}")
    except ValidationError as e:
        return error_response(400, "Invalid request", errors=e.errors(include_url=False))

    try:
        schedules = service.add_series(_to_schedule_details(request), request.repeat_days)
    except ResourceNotFoundException as e:
        logger.warning(f"Schedule rejected: {e}")
        return error_response(404, str(e))
    except (BusinessRuleViolationException, ValueError) as e:
        return error_response(400, str(e))

    logger.info("Schedules added", extra={"count": len(schedules)})
    return api_response(201, to_response(schedules))


def _to_schedule_details(request: AddScheduleRequest) -> ScheduleDetails:
    return {
        "route_id": request.route_id,
        "bus_id": request.bus_id,
        "departure_date": request.departure_date.isoformat(),
        "departure_time": request.departure_time,
        "fare_multiplier": request.fare_multiplier,
    }
