from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from bus_booking.route.applications.delete_route import DeleteRouteService
from bus_booking.route.domain.value_object import RouteId
from bus_booking.route.infrastructure.store_route_repository import (
    StoreRouteRepository,
)
from bus_booking.schedule.infrastructure.store_schedule_repository import (
    StoreScheduleRepository,
)
from bus_booking.shared.infrastructure import CollectionStore, DynamoDBKeyValueStorage
from bus_booking.shared.utils import deletion_response, error_response

logger = Logger()

store = CollectionStore(DynamoDBKeyValueStorage())
service = DeleteRouteService(
    repository=StoreRouteRepository(store),
    schedule_repository=StoreScheduleRepository(store),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """路線削除 Lambda Handler"""
    route_id = ((event.path_parameters or {}).get("route_id") or "").strip()
    if not route_id:
        return error_response(400, "route_id is required")

    logger.info("Received delete route request", extra={"route_id": route_id})
    result = service.delete(RouteId(value=route_id))
    return deletion_response(result, route_id)
