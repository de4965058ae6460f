from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from bus_booking.booking.infrastructure.store_booking_repository import (
    StoreBookingRepository,
)
from bus_booking.bus.infrastructure.store_bus_repository import StoreBusRepository
from bus_booking.listing import filter_records, paginate
from bus_booking.reporting.applications.search_trips import SearchTripsService
from bus_booking.reporting.handlers.request_models import SearchTripsRequest
from bus_booking.reporting.handlers.response_models import to_search_response
from bus_booking.route.infrastructure.store_route_repository import (
    StoreRouteRepository,
)
from bus_booking.schedule.infrastructure.store_schedule_repository import (
    StoreScheduleRepository,
)
from bus_booking.shared.infrastructure import CollectionStore, DynamoDBKeyValueStorage
from bus_booking.shared.utils import api_response, error_response

logger = Logger()

SEARCH_KEYS = ("bus_name", "seat_type")

store = CollectionStore(DynamoDBKeyValueStorage())
service = SearchTripsService(
    route_repository=StoreRouteRepository(store),
    bus_repository=StoreBusRepository(store),
    schedule_repository=StoreScheduleRepository(store),
    booking_repository=StoreBookingRepository(store),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """運行便検索 Lambda Handler

    出発地・到着地・出発日はすべて必須。結果はバス名・座席タイプで
    絞り込んだうえでページ分割して返す。
    """
    try:
        request = SearchTripsRequest.model_validate(event.query_string_parameters or {})
    except ValidationError as e:
        return error_response(
            400,
            "source, destination and date are required",
            errors=e.errors(include_url=False),
        )

    logger.info(
        "Searching trips",
        extra={
            "source": request.source,
            "destination": request.destination,
            "date": request.date.isoformat(),
        },
    )
    options = service.search(
        request.source, request.destination, request.date.isoformat()
    )
    filtered = filter_records(options, request.search, SEARCH_KEYS)
    return api_response(
        200, to_search_response(paginate(filtered, request.page, request.page_size))
    )
