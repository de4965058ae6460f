from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from bus_booking.booking.applications.confirm_booking import ConfirmBookingService
from bus_booking.booking.applications.update_booking import UpdateBookingService
from bus_booking.booking.domain.factory import BookingDetails, BookingFactory
from bus_booking.booking.handlers.request_models import ConfirmBookingRequest
from bus_booking.booking.handlers.response_models import to_response
from bus_booking.booking.infrastructure.store_booking_repository import (
    StoreBookingRepository,
)
from bus_booking.schedule.infrastructure.store_schedule_repository import (
    StoreScheduleRepository,
)
from bus_booking.shared.domain import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
    SeatUnavailableException,
)
from bus_booking.shared.infrastructure import CollectionStore, DynamoDBKeyValueStorage
from bus_booking.shared.utils import api_response, error_response

logger = Logger()

store = CollectionStore(DynamoDBKeyValueStorage())
repository = StoreBookingRepository(store)
service = ConfirmBookingService(
    repository=repository,
    schedule_repository=StoreScheduleRepository(store),
    update_service=UpdateBookingService(repository=repository, factory=BookingFactory()),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """決済確定 Lambda Handler

    決済成功時のみ予約を作成する。選択座席が既に埋まっていれば 409、
    運行スケジュールが存在しなければ 404 を返す。
    """
    logger.info("Received booking confirmation request")

    try:
        request = ConfirmBookingRequest.model_validate_json(event.body or "{}")
    except ValidationError as e:
        return error_response(400, "Invalid request", errors=e.errors(include_url=False))

    try:
        booking = service.confirm(
            _to_booking_details(request), payment_succeeded=request.payment_succeeded
        )
    except SeatUnavailableException as e:
        logger.warning(f"Seat conflict: {e}")
        return error_response(409, str(e), seats=e.seats)
    except ResourceNotFoundException as e:
        return error_response(404, str(e))
    except BusinessRuleViolationException as e:
        return error_response(400, str(e))
    except Exception:
        logger.exception("Unexpected error while confirming booking")
        return error_response(500, "Internal server error")

    if booking is None:
        return error_response(402, "Payment failed. Booking was not recorded.")

    logger.info("Booking recorded", extra={"booking_id": str(booking.id)})
    return api_response(201, to_response(booking))


def _to_booking_details(request: ConfirmBookingRequest) -> BookingDetails:
    details: BookingDetails = {
        "schedule_id": request.schedule_id,
        "customer_name": request.customer_name,
        "travel_origin": request.travel_origin,
        "travel_destination": request.travel_destination,
        "seats_booked": request.seats_booked,
        "total_fare": request.total_fare,
        "passenger_details": [
            {
                "name": p.name,
                "age": p.age,
                "gender": p.gender,
                "seat_number": p.seat_number,
            }
            for p in request.passenger_details
        ],
    }
    if request.customer_id:
        details["customer_id"] = request.customer_id
    return details
