import itertools
import threading

from flight_booking.booking.domain.entity import Passenger
from flight_booking.booking.domain.repository import PassengerRepository
from flight_booking.booking.domain.value_object import PassengerId
from flight_booking.shared.utils.validators import not_none


class InMemoryPassengerRepository(PassengerRepository):
    """メモリ上で乗客を保持する PassengerRepository の具象実装"""

    def __init__(self) -> None:
        self._passengers: dict[PassengerId, Passenger] = {}
        self._id_sequence = itertools.count(1)
        self._lock = threading.Lock()

    def save(self, passenger: Passenger) -> Passenger:
        """乗客を保存する（ID 未採番なら採番する）"""
        not_none(passenger, "Cannot save a null passenger.")
        with self._lock:
            if passenger.id is None:
                passenger = Passenger.from_persistence(
                    id=PassengerId(next(self._id_sequence)),
                    name=passenger.name,
                    email=passenger.email,
                )
            # Passenger は不変なのでそのまま保持する
            self._passengers[passenger.id] = passenger
        return passenger

    def find_by_id(self, passenger_id: PassengerId) -> Passenger | None:
        not_none(passenger_id, "Passenger ID cannot be null when searching.")
        with self._lock:
            return self._passengers.get(passenger_id)
