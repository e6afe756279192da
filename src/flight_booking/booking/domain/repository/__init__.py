from .booking_repository import BookingRepository as BookingRepository
from .flight_repository import FlightRepository as FlightRepository
from .passenger_repository import PassengerRepository as PassengerRepository
