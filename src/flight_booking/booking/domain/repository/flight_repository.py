from abc import abstractmethod

from flight_booking.booking.domain.entity import Flight
from flight_booking.booking.domain.value_object import FlightId
from flight_booking.shared.domain import Repository


class FlightRepository(Repository[Flight, FlightId]):
    """フライトレポジトリ"""

    @abstractmethod
    def save(self, flight: Flight) -> Flight:
        """永続化する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        """フライトIDで検索"""
        raise NotImplementedError

    @abstractmethod
    def update(
        self, flight: Flight, expected_occupied_seats: int | None = None
    ) -> None:
        """使用中座席数を更新する

        expected_occupied_seats を指定した場合、保存済みの値と一致しなければ
        OptimisticLockException を送出する（同時予約による定員超過を防ぐ）。
        """
        raise NotImplementedError

    @abstractmethod
    def release_seat(self, flight_id: FlightId) -> None:
        """保存済みの使用中座席数を1減らす

        読み込み時点の値ではなく、ストア上の現在値に対する差分更新。
        現在値が 0 の場合は EmptyFlightSeatReleaseException を送出する。
        """
        raise NotImplementedError
