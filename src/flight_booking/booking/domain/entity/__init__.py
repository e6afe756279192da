from .booking import Booking as Booking
from .flight import Flight as Flight
from .passenger import Passenger as Passenger
