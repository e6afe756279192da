from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking.booking.handlers.dependencies import build_booking_service
from flight_booking.booking.handlers.error_response import to_error_response
from flight_booking.booking.handlers.response_models import to_list_response
from flight_booking.shared.utils import api_response

logger = Logger()

service = build_booking_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約一覧取得 Lambda Handler"""
    logger.info("Listing all bookings")

    try:
        bookings = service.list_bookings()
    except Exception as e:
        logger.exception("Failed to list bookings")
        return to_error_response(e)

    return api_response(200, to_list_response(bookings))
