from .exceptions import (
    BookingAlreadyCancelledException as BookingAlreadyCancelledException,
)
from .exceptions import (
    BookingCancellationWindowClosedException as BookingCancellationWindowClosedException,
)
from .exceptions import BookingNotFoundException as BookingNotFoundException
from .exceptions import (
    EmptyFlightSeatReleaseException as EmptyFlightSeatReleaseException,
)
from .exceptions import (
    FlightAlreadyDepartedException as FlightAlreadyDepartedException,
)
from .exceptions import FlightNotFoundException as FlightNotFoundException
from .exceptions import FlightOverbookedException as FlightOverbookedException
from .exceptions import PassengerNotFoundException as PassengerNotFoundException
