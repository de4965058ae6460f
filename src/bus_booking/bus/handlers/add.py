from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from bus_booking.bus.applications.add_bus import AddBusService
from bus_booking.bus.domain.factory import BusFactory
from bus_booking.bus.handlers.request_models import AddBusRequest
from bus_booking.bus.handlers.response_models import to_response
from bus_booking.bus.infrastructure.store_bus_repository import StoreBusRepository
from bus_booking.shared.domain import BusinessRuleViolationException
from bus_booking.shared.infrastructure import CollectionStore, DynamoDBKeyValueStorage
from bus_booking.shared.utils import api_response, error_response

logger = Logger()

store = CollectionStore(DynamoDBKeyValueStorage())
repository = StoreBusRepository(store)
factory = BusFactory()
service = AddBusService(repository=repository, factory=factory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """バス追加 Lambda Handler"""
    logger.info("Received add bus request")

    try:
        request = AddBusRequest.model_validate_json(event.body or "{}")
    except ValidationError as e:
        return error_response(400, "Invalid request", errors=e.errors(include_url=False))

    try:
        bus = service.add(
            {
                "name": request.name,
                "seat_type": request.seat_type,
                "total_seats": request.total_seats,
                "amenities": request.amenities,
            }
        )
    except (BusinessRuleViolationException, ValueError) as e:
        return error_response(400, str(e))

    return api_response(201, to_response(bus))
