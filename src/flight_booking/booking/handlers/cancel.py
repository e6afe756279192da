from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking.booking.domain.value_object import BookingId
from flight_booking.booking.handlers.dependencies import build_booking_service
from flight_booking.booking.handlers.error_response import (
    is_client_error,
    to_error_response,
)
from flight_booking.booking.handlers.request_models import CancelBookingRequest
from flight_booking.booking.handlers.response_models import to_response
from flight_booking.shared.domain import IsoDateTime
from flight_booking.shared.utils import api_response

logger = Logger()

service = build_booking_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約キャンセル Lambda Handler"""
    path_params = event.path_parameters or {}
    logger.info(
        "Received cancel booking request",
        extra={"booking_id": path_params.get("booking_id")},
    )

    try:
        request = CancelBookingRequest.model_validate(path_params)
        booking = service.cancel_booking(
            booking_id=BookingId(request.booking_id),
            current_time=IsoDateTime.now(),
        )
    except Exception as e:
        if is_client_error(e):
            logger.warning(
                "Cancel booking rejected",
                extra={"error": type(e).__name__, "reason": str(e)},
            )
        else:
            logger.exception("Failed to cancel booking")
        return to_error_response(e)

    return api_response(200, to_response(booking))
