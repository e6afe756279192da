from .booking_id import BookingId as BookingId
from .flight_id import FlightId as FlightId
from .passenger_id import PassengerId as PassengerId
