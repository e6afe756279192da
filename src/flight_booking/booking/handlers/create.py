from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking.booking.domain.value_object import FlightId, PassengerId
from flight_booking.booking.handlers.dependencies import build_booking_service
from flight_booking.booking.handlers.error_response import (
    is_client_error,
    to_error_response,
)
from flight_booking.booking.handlers.request_models import CreateBookingRequest
from flight_booking.booking.handlers.response_models import to_response
from flight_booking.shared.domain import IsoDateTime
from flight_booking.shared.utils import api_response

logger = Logger()

service = build_booking_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler

    リクエストボディの乗客ID・フライトIDで座席を確保し、予約を作成する。
    """
    logger.info("Received create booking request")

    try:
        request = CreateBookingRequest.model_validate_json(event.decoded_body or "{}")
        booking = service.create_booking(
            passenger_id=PassengerId(request.passenger_id),
            flight_id=FlightId(request.flight_id),
            current_time=IsoDateTime.now(),
        )
    except Exception as e:
        if is_client_error(e):
            logger.warning(
                "Create booking rejected",
                extra={"error": type(e).__name__, "reason": str(e)},
            )
        else:
            logger.exception("Failed to create booking")
        return to_error_response(e)

    return api_response(201, to_response(booking))
