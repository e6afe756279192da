from flight_booking.booking.domain.value_object import BookingId, FlightId, PassengerId
from flight_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)


class PassengerNotFoundException(ResourceNotFoundException):
    """乗客が存在しない場合"""

    def __init__(self, passenger_id: PassengerId | None) -> None:
        self.passenger_id = passenger_id
        super().__init__(f"Passenger with ID {passenger_id} not found.")


class FlightNotFoundException(ResourceNotFoundException):
    """フライトが存在しない場合"""

    def __init__(self, flight_id: FlightId | None) -> None:
        self.flight_id = flight_id
        super().__init__(f"Flight with ID {flight_id} not found.")


class BookingNotFoundException(ResourceNotFoundException):
    """予約が存在しない場合"""

    def __init__(self, booking_id: BookingId | None) -> None:
        self.booking_id = booking_id
        super().__init__(f"Booking with ID {booking_id} not found.")


class FlightAlreadyDepartedException(BusinessRuleViolationException):
    """出発済みのフライトに対して座席操作を行った場合"""

    def __init__(self, flight_id: FlightId | None) -> None:
        self.flight_id = flight_id
        super().__init__(
            f"Flight {flight_id} has already departed. Operations are not allowed."
        )


class FlightOverbookedException(BusinessRuleViolationException):
    """満席のフライトに座席を確保しようとした場合"""

    def __init__(self, flight_id: FlightId | None) -> None:
        self.flight_id = flight_id
        super().__init__(f"Flight {flight_id} is fully booked. No seats available.")


class EmptyFlightSeatReleaseException(BusinessRuleViolationException):
    """使用中の座席がないフライトで座席を解放しようとした場合"""

    def __init__(self, flight_id: FlightId | None) -> None:
        self.flight_id = flight_id
        super().__init__(
            f"Cannot release seat for Flight {flight_id} "
            "because it has no occupied seats."
        )


class BookingAlreadyCancelledException(BusinessRuleViolationException):
    """キャンセル済みの予約を再度キャンセルしようとした場合"""

    def __init__(self, booking_id: BookingId | None) -> None:
        self.booking_id = booking_id
        super().__init__(
            f"Booking {booking_id} is already cancelled "
            "and cannot be cancelled again."
        )


class BookingCancellationWindowClosedException(BusinessRuleViolationException):
    """フライト出発後に予約をキャンセルしようとした場合"""

    def __init__(self, booking_id: BookingId | None) -> None:
        self.booking_id = booking_id
        super().__init__(
            f"Cannot cancel Booking {booking_id} "
            "because the flight has already departed."
        )
