from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from bus_booking.route.applications.add_route import AddRouteService
from bus_booking.route.domain.factory import RouteDetails, RouteFactory
from bus_booking.route.handlers.request_models import AddRouteRequest
from bus_booking.route.handlers.response_models import to_response
from bus_booking.route.infrastructure.store_route_repository import (
    StoreRouteRepository,
)
from bus_booking.shared.domain import BusinessRuleViolationException
from bus_booking.shared.infrastructure import CollectionStore, DynamoDBKeyValueStorage
from bus_booking.shared.utils import api_response, error_response

logger = Logger()

store = CollectionStore(DynamoDBKeyValueStorage())
repository = StoreRouteRepository(store)
factory = RouteFactory()
service = AddRouteService(repository=repository, factory=factory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """路線追加 Lambda Handler"""
    logger.info("Received add route request")

    try:
        request = AddRouteRequest.model_validate_json(event.body or "{}")
    except ValidationError as e:
        return error_response(400, "Invalid request", errors=e.errors(include_url=False))

    try:
        route = service.add(_to_route_details(request))
    except (BusinessRuleViolationException, ValueError) as e:
        return error_response(400, str(e))

    logger.info("Route added", extra={"route_id": str(route.id)})
    return api_response(201, to_response(route))


def _to_route_details(request: AddRouteRequest) -> RouteDetails:
    return {
        "source": request.source,
        "destination": request.destination,
        "duration": request.duration,
        "base_fare": request.base_fare,
        "distance": request.distance,
    }
