from __future__ import annotations

from flight_booking.booking.domain.entity.flight import Flight
from flight_booking.booking.domain.entity.passenger import Passenger
from flight_booking.booking.domain.enum import BookingStatus
from flight_booking.booking.domain.exception import (
    BookingAlreadyCancelledException,
    BookingCancellationWindowClosedException,
)
from flight_booking.booking.domain.value_object import BookingId
from flight_booking.shared.domain import Entity, IsoDateTime
from flight_booking.shared.utils.validators import not_none


class Booking(Entity[BookingId]):
    """フライト予約

    乗客・フライトへの参照は不変。ステータスのみ CONFIRMED → CANCELLED に遷移する。
    """

    def __init__(
        self,
        id: BookingId | None,
        passenger: Passenger,
        flight: Flight,
        status: BookingStatus,
        created_at: IsoDateTime,
    ) -> None:
        not_none(passenger, "Passenger is required for a booking.")
        not_none(flight, "Flight is required for a booking.")
        not_none(status, "Booking status cannot be null.")
        not_none(created_at, "Created date cannot be null.")
        super().__init__(id)

        self._passenger = passenger
        self._flight = flight
        self._status = status
        self._created_at = created_at

    @classmethod
    def create(
        cls, passenger: Passenger, flight: Flight, current_time: IsoDateTime
    ) -> Booking:
        """確定済みの未永続化予約を生成する

        座席の確保は行わない。呼び出し側で flight.reserve_seat() 済みであること。
        """
        return cls(
            id=None,
            passenger=passenger,
            flight=flight,
            status=BookingStatus.CONFIRMED,
            created_at=current_time,
        )

    @classmethod
    def from_persistence(
        cls,
        id: BookingId,
        passenger: Passenger,
        flight: Flight,
        status: BookingStatus,
        created_at: IsoDateTime,
    ) -> Booking:
        """永続化済みデータから復元する"""
        not_none(id, "Booking ID is required for persistence reconstruction.")
        return cls(
            id=id,
            passenger=passenger,
            flight=flight,
            status=status,
            created_at=created_at,
        )

    @property
    def passenger(self) -> Passenger:
        return self._passenger

    @property
    def flight(self) -> Flight:
        return self._flight

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    def cancel(self, current_time: IsoDateTime) -> None:
        """予約をキャンセルし、フライトの座席を解放する

        - キャンセル済みの予約は再度キャンセルできない
        - フライト出発後はキャンセルできない
        座席の解放に失敗した場合、ステータスは CONFIRMED のまま変わらない。
        """
        not_none(current_time, "Current time is required for cancellation.")
        self._validate_is_active()
        self._validate_flight_has_not_departed(current_time)

        self._flight.release_seat(current_time)
        self._status = BookingStatus.CANCELLED

    def _validate_is_active(self) -> None:
        if self._status == BookingStatus.CANCELLED:
            raise BookingAlreadyCancelledException(self.id)

    def _validate_flight_has_not_departed(self, current_time: IsoDateTime) -> None:
        if self._flight.has_departed(current_time):
            raise BookingCancellationWindowClosedException(self.id)

    def __repr__(self) -> str:
        return (
            f"Booking(id={self.id}, passenger={self._passenger!r}, "
            f"flight_id={self._flight.id}, status={self._status.value}, "
            f"created_at={self._created_at})"
        )
