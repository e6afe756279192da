import copy
import itertools
import threading

from flight_booking.booking.domain.entity import Flight
from flight_booking.booking.domain.exception import (
    EmptyFlightSeatReleaseException,
    FlightNotFoundException,
)
from flight_booking.booking.domain.repository import FlightRepository
from flight_booking.booking.domain.value_object import FlightId
from flight_booking.shared.domain.exception import OptimisticLockException
from flight_booking.shared.utils.validators import not_none


class InMemoryFlightRepository(FlightRepository):
    """メモリ上でフライトを保持する FlightRepository の具象実装

    フライトはスナップショット（コピー）として保持する。
    取得したインスタンスを変更しても、save / update するまで反映されない。
    """

    def __init__(self) -> None:
        self._flights: dict[FlightId, Flight] = {}
        self._id_sequence = itertools.count(1)
        self._lock = threading.Lock()

    def save(self, flight: Flight) -> Flight:
        """フライトを保存する（ID 未採番なら採番する）"""
        not_none(flight, "Cannot save a null flight.")
        with self._lock:
            if flight.id is None:
                flight = Flight.from_persistence(
                    id=FlightId(next(self._id_sequence)),
                    origin=flight.origin,
                    destination=flight.destination,
                    capacity=flight.capacity,
                    occupied_seats=flight.occupied_seats,
                    departure_time=flight.departure_time,
                )
            self._flights[flight.id] = copy.copy(flight)
        return flight

    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        not_none(flight_id, "Flight ID cannot be null when searching.")
        with self._lock:
            stored = self._flights.get(flight_id)
            return copy.copy(stored) if stored is not None else None

    def update(
        self, flight: Flight, expected_occupied_seats: int | None = None
    ) -> None:
        """使用中座席数を compare-and-swap で更新する"""
        not_none(flight, "Cannot update a null flight.")
        not_none(flight.id, "Cannot update a flight that has not been saved.")
        with self._lock:
            stored = self._flights.get(flight.id)
            if stored is None:
                raise FlightNotFoundException(flight.id)
            if (
                expected_occupied_seats is not None
                and stored.occupied_seats != expected_occupied_seats
            ):
                raise OptimisticLockException(
                    "Flight",
                    flight.id,
                    "occupied_seats",
                    expected_occupied_seats,
                    actual=stored.occupied_seats,
                )
            self._flights[flight.id] = copy.copy(flight)

    def release_seat(self, flight_id: FlightId) -> None:
        """保存済みの使用中座席数をロック下で1減らす"""
        not_none(flight_id, "Flight ID cannot be null when releasing a seat.")
        with self._lock:
            stored = self._flights.get(flight_id)
            if stored is None:
                raise FlightNotFoundException(flight_id)
            if stored.occupied_seats <= 0:
                raise EmptyFlightSeatReleaseException(flight_id)
            self._flights[flight_id] = Flight.from_persistence(
                id=stored.id,
                origin=stored.origin,
                destination=stored.destination,
                capacity=stored.capacity,
                occupied_seats=stored.occupied_seats - 1,
                departure_time=stored.departure_time,
            )
