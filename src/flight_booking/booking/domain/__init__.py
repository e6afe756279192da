from .value_object import BookingId as BookingId
from .value_object import FlightId as FlightId
from .value_object import PassengerId as PassengerId
from .enum import BookingStatus as BookingStatus
from .entity import Booking as Booking
from .entity import Flight as Flight
from .entity import Passenger as Passenger
from .repository import BookingRepository as BookingRepository
from .repository import FlightRepository as FlightRepository
from .repository import PassengerRepository as PassengerRepository
