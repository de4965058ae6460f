from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from bus_booking.booking.infrastructure.store_booking_repository import (
    StoreBookingRepository,
)
from bus_booking.customer.domain.value_object import CustomerId
from bus_booking.reporting.applications.customer_trips import CustomerTripsService
from bus_booking.reporting.handlers.response_models import to_customer_trips_response
from bus_booking.route.infrastructure.store_route_repository import (
    StoreRouteRepository,
)
from bus_booking.schedule.infrastructure.store_schedule_repository import (
    StoreScheduleRepository,
)
from bus_booking.shared.infrastructure import CollectionStore, DynamoDBKeyValueStorage
from bus_booking.shared.utils import api_response, error_response

logger = Logger()

store = CollectionStore(DynamoDBKeyValueStorage())
service = CustomerTripsService(
    booking_repository=StoreBookingRepository(store),
    schedule_repository=StoreScheduleRepository(store),
    route_repository=StoreRouteRepository(store),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """顧客の予約履歴取得 Lambda Handler"""
    customer_id = ((event.path_parameters or {}).get("customer_id") or "").strip()
    if not customer_id:
        return error_response(400, "customer_id is required")

    logger.info("Listing customer trips", extra={"customer_id": customer_id})
    trips = service.trips(CustomerId(value=customer_id))
    return api_response(200, to_customer_trips_response(trips))
