from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from bus_booking.booking.infrastructure.store_booking_repository import (
    StoreBookingRepository,
)
from bus_booking.bus.infrastructure.store_bus_repository import StoreBusRepository
from bus_booking.customer.infrastructure.store_customer_repository import (
    StoreCustomerRepository,
)
from bus_booking.reporting.applications.dashboard import DashboardService
from bus_booking.reporting.handlers.response_models import to_dashboard_response
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
service = DashboardService(
    route_repository=StoreRouteRepository(store),
    bus_repository=StoreBusRepository(store),
    schedule_repository=StoreScheduleRepository(store),
    booking_repository=StoreBookingRepository(store),
    customer_repository=StoreCustomerRepository(store),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """管理画面集計 Lambda Handler"""
    logger.info("Building dashboard overview")

    try:
        overview = service.overview()
    except Exception:
        logger.exception("Failed to build dashboard overview")
        return error_response(500, "Internal server error")

    return api_response(200, to_dashboard_response(overview))
