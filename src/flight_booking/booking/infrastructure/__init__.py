from .in_memory_booking_repository import (
    InMemoryBookingRepository as InMemoryBookingRepository,
)
from .in_memory_flight_repository import (
    InMemoryFlightRepository as InMemoryFlightRepository,
)
from .in_memory_passenger_repository import (
    InMemoryPassengerRepository as InMemoryPassengerRepository,
)
