from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from bus_booking.customer.applications.add_customer import AddCustomerService
from bus_booking.customer.applications.sign_up import SignUpService
from bus_booking.customer.domain.factory import CustomerFactory
from bus_booking.customer.handlers.request_models import SignUpRequest
from bus_booking.customer.handlers.response_models import to_response
from bus_booking.customer.infrastructure.store_customer_repository import (
    StoreCustomerRepository,
)
from bus_booking.shared.domain import BusinessRuleViolationException
from bus_booking.shared.infrastructure import CollectionStore, DynamoDBKeyValueStorage
from bus_booking.shared.utils import api_response, error_response

logger = Logger()

store = CollectionStore(DynamoDBKeyValueStorage())
repository = StoreCustomerRepository(store)
service = SignUpService(
    repository=repository,
    add_customer_service=AddCustomerService(
        repository=repository, factory=CustomerFactory()
    ),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """サインアップ Lambda Handler"""
    logger.info("Received sign-up request")

    try:
        request = SignUpRequest.model_validate_json(event.body or "{}")
    except ValidationError as e:
        return error_response(400, "Invalid request", errors=e.errors(include_url=False))

    try:
        result = service.sign_up(request.name, request.phone)
    except (BusinessRuleViolationException, ValueError) as e:
        return error_response(400, str(e))

    if not result.succeeded or result.customer is None:
        return error_response(409, result.message)
    return api_response(201, to_response(result.customer, result.message))
