from abc import abstractmethod

from flight_booking.booking.domain.entity import Passenger
from flight_booking.booking.domain.value_object import PassengerId
from flight_booking.shared.domain import Repository


class PassengerRepository(Repository[Passenger, PassengerId]):
    """乗客レポジトリ"""

    @abstractmethod
    def save(self, passenger: Passenger) -> Passenger:
        """永続化する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, passenger_id: PassengerId) -> Passenger | None:
        """乗客IDで検索"""
        raise NotImplementedError
