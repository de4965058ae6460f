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
from bus_booking.reporting.applications.seat_map import SeatMapService
from bus_booking.reporting.handlers.response_models import to_seat_map_response
from bus_booking.route.infrastructure.store_route_repository import (
    StoreRouteRepository,
)
from bus_booking.schedule.domain.value_object import ScheduleId
from bus_booking.schedule.infrastructure.store_schedule_repository import (
    StoreScheduleRepository,
)
from bus_booking.shared.infrastructure import CollectionStore, DynamoDBKeyValueStorage
from bus_booking.shared.utils import api_response, error_response

logger = Logger()

store = CollectionStore(DynamoDBKeyValueStorage())
service = SeatMapService(
    schedule_repository=StoreScheduleRepository(store),
    route_repository=StoreRouteRepository(store),
    bus_repository=StoreBusRepository(store),
    booking_repository=StoreBookingRepository(store),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """座席状況取得 Lambda Handler"""
    schedule_id = ((event.path_parameters or {}).get("schedule_id") or "").strip()
    if not schedule_id:
        return error_response(400, "schedule_id is required")

    seat_map = service.seat_map(ScheduleId(value=schedule_id))
    if seat_map is None:
        return error_response(404, f"Schedule not found: {schedule_id}")
    return api_response(200, to_seat_map_response(seat_map))
