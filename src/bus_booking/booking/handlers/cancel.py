from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from bus_booking.booking.applications.cancel_booking import CancelBookingService
from bus_booking.booking.domain.value_object import BookingId
from bus_booking.booking.handlers.response_models import to_response
from bus_booking.booking.infrastructure.store_booking_repository import (
    StoreBookingRepository,
)
from bus_booking.shared.infrastructure import CollectionStore, DynamoDBKeyValueStorage
from bus_booking.shared.utils import api_response, error_response

logger = Logger()

store = CollectionStore(DynamoDBKeyValueStorage())
service = CancelBookingService(repository=StoreBookingRepository(store))


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約キャンセル Lambda Handler"""
    booking_id = ((event.path_parameters or {}).get("booking_id") or "").strip()
    if not booking_id:
        return error_response(400, "booking_id is required")

    logger.info("Received cancel booking request", extra={"booking_id": booking_id})
    booking = service.cancel(BookingId(value=booking_id))
    if booking is None:
        return error_response(404, f"Booking not found: {booking_id}")
    return api_response(200, to_response(booking))
