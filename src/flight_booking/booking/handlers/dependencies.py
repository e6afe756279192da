from flight_booking.booking.applications import BookingService
from flight_booking.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from flight_booking.booking.infrastructure.dynamodb_flight_repository import (
    DynamoDBFlightRepository,
)
from flight_booking.booking.infrastructure.dynamodb_passenger_repository import (
    DynamoDBPassengerRepository,
)


def build_booking_service(table_name: str | None = None) -> BookingService:
    """DynamoDB レポジトリで BookingService を組み立てる（TABLE_NAME を参照）"""
    passenger_repository = DynamoDBPassengerRepository(table_name)
    flight_repository = DynamoDBFlightRepository(table_name)
    booking_repository = DynamoDBBookingRepository(
        passenger_repository=passenger_repository,
        flight_repository=flight_repository,
        table_name=table_name,
    )
    return BookingService(
        booking_repository=booking_repository,
        passenger_repository=passenger_repository,
        flight_repository=flight_repository,
    )
