from __future__ import annotations

from flight_booking.booking.domain.exception import (
    EmptyFlightSeatReleaseException,
    FlightAlreadyDepartedException,
    FlightOverbookedException,
)
from flight_booking.booking.domain.value_object import FlightId
from flight_booking.shared.domain import Entity, IsoDateTime
from flight_booking.shared.utils.validators import (
    is_greater_or_equal_than,
    is_positive,
    not_blank,
    not_none,
)


class Flight(Entity[FlightId]):
    """フライトエンティティ

    座席在庫（定員・使用中座席数）を管理する。
    使用中座席数は reserve_seat / release_seat でのみ変化し、
    常に 0 <= occupied_seats <= capacity を満たす。
    """

    def __init__(
        self,
        id: FlightId | None,
        origin: str,
        destination: str,
        capacity: int,
        occupied_seats: int,
        departure_time: IsoDateTime,
    ) -> None:
        not_blank(origin, "Origin cannot be blank")
        not_blank(destination, "Destination cannot be blank")
        is_positive(capacity, "Capacity must be positive")
        not_none(departure_time, "Departure time cannot be null")
        is_greater_or_equal_than(
            occupied_seats, 0, "Occupied seats cannot be negative"
        )
        is_greater_or_equal_than(
            capacity, occupied_seats, "Occupied seats cannot exceed capacity"
        )
        super().__init__(id)

        self._origin = origin
        self._destination = destination
        self._capacity = capacity
        self._occupied_seats = occupied_seats
        self._departure_time = departure_time

    @classmethod
    def create(
        cls,
        origin: str,
        destination: str,
        capacity: int,
        departure_time: IsoDateTime,
    ) -> Flight:
        """空席状態の未永続化フライトを生成する"""
        return cls(
            id=None,
            origin=origin,
            destination=destination,
            capacity=capacity,
            occupied_seats=0,
            departure_time=departure_time,
        )

    @classmethod
    def from_persistence(
        cls,
        id: FlightId,
        origin: str,
        destination: str,
        capacity: int,
        occupied_seats: int,
        departure_time: IsoDateTime,
    ) -> Flight:
        """永続化済みデータから復元する"""
        not_none(id, "ID is required for persisted flight")
        return cls(
            id=id,
            origin=origin,
            destination=destination,
            capacity=capacity,
            occupied_seats=occupied_seats,
            departure_time=departure_time,
        )

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def destination(self) -> str:
        return self._destination

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def occupied_seats(self) -> int:
        return self._occupied_seats

    @property
    def departure_time(self) -> IsoDateTime:
        return self._departure_time

    def available_seats(self) -> int:
        """空席数"""
        return self._capacity - self._occupied_seats

    def has_departed(self, current_time: IsoDateTime) -> bool:
        """現在時刻が出発時刻を過ぎているかどうか（出発時刻ちょうどは含まない）"""
        return current_time.is_after(self._departure_time)

    def reserve_seat(self, current_time: IsoDateTime) -> None:
        """座席を1つ確保する"""
        not_none(current_time, "Current time is required")
        self._validate_not_departed(current_time)
        self._validate_capacity()

        self._occupied_seats += 1

    def release_seat(self, current_time: IsoDateTime) -> None:
        """座席を1つ解放する"""
        not_none(current_time, "Current time is required")
        self._validate_not_departed(current_time)
        self._validate_occupied_seats()

        self._occupied_seats -= 1

    def _validate_not_departed(self, current_time: IsoDateTime) -> None:
        if self.has_departed(current_time):
            raise FlightAlreadyDepartedException(self.id)

    def _validate_capacity(self) -> None:
        if self._occupied_seats >= self._capacity:
            raise FlightOverbookedException(self.id)

    def _validate_occupied_seats(self) -> None:
        if self._occupied_seats <= 0:
            raise EmptyFlightSeatReleaseException(self.id)
