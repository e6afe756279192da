import itertools
import threading
from dataclasses import dataclass, replace

from flight_booking.booking.domain.entity import Booking
from flight_booking.booking.domain.enum import BookingStatus
from flight_booking.booking.domain.exception import (
    BookingNotFoundException,
    FlightNotFoundException,
    PassengerNotFoundException,
)
from flight_booking.booking.domain.repository import (
    BookingRepository,
    FlightRepository,
    PassengerRepository,
)
from flight_booking.booking.domain.value_object import BookingId, FlightId, PassengerId
from flight_booking.shared.domain import IsoDateTime
from flight_booking.shared.domain.exception import OptimisticLockException
from flight_booking.shared.utils.validators import not_none


@dataclass(frozen=True)
class _BookingRecord:
    """保存形式（乗客・フライトは ID で参照する）"""

    booking_id: BookingId
    passenger_id: PassengerId
    flight_id: FlightId
    status: BookingStatus
    created_at: IsoDateTime


class InMemoryBookingRepository(BookingRepository):
    """メモリ上で予約を保持する BookingRepository の具象実装

    予約は乗客・フライトの ID のみを保持し、取得時に各レポジトリから復元する。
    復元されたフライトは常に最新の座席数を持つ。
    """

    def __init__(
        self,
        passenger_repository: PassengerRepository,
        flight_repository: FlightRepository,
    ) -> None:
        self._passenger_repository = passenger_repository
        self._flight_repository = flight_repository
        self._records: dict[BookingId, _BookingRecord] = {}
        self._id_sequence = itertools.count(1)
        self._lock = threading.Lock()

    def save(self, booking: Booking) -> Booking:
        """予約を保存する（ID 未採番なら採番する）"""
        not_none(booking, "Cannot save a null booking.")
        not_none(booking.passenger.id, "Booking must reference a saved passenger.")
        not_none(booking.flight.id, "Booking must reference a saved flight.")
        with self._lock:
            if booking.id is None:
                booking = Booking.from_persistence(
                    id=BookingId(next(self._id_sequence)),
                    passenger=booking.passenger,
                    flight=booking.flight,
                    status=booking.status,
                    created_at=booking.created_at,
                )
            self._records[booking.id] = self._to_record(booking)
        return booking

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        not_none(booking_id, "Booking ID cannot be null when searching.")
        with self._lock:
            record = self._records.get(booking_id)
        if record is None:
            return None
        return self._to_entity(record)

    def find_all(self) -> list[Booking]:
        with self._lock:
            records = list(self._records.values())
        return [self._to_entity(record) for record in records]

    def update(
        self, booking: Booking, expected_status: BookingStatus | None = None
    ) -> None:
        """予約のステータスを更新する"""
        not_none(booking, "Cannot update a null booking.")
        not_none(booking.id, "Cannot update a booking that has not been saved.")
        with self._lock:
            record = self._records.get(booking.id)
            if record is None:
                raise BookingNotFoundException(booking.id)
            if expected_status is not None and record.status != expected_status:
                raise OptimisticLockException(
                    "Booking", booking.id, "status", expected_status.value
                )
            self._records[booking.id] = replace(record, status=booking.status)

    def _to_record(self, booking: Booking) -> _BookingRecord:
        return _BookingRecord(
            booking_id=booking.id,
            passenger_id=booking.passenger.id,
            flight_id=booking.flight.id,
            status=booking.status,
            created_at=booking.created_at,
        )

    def _to_entity(self, record: _BookingRecord) -> Booking:
        """保存形式からドメインエンティティを復元する"""
        passenger = self._passenger_repository.find_by_id(record.passenger_id)
        if passenger is None:
            raise PassengerNotFoundException(record.passenger_id)
        flight = self._flight_repository.find_by_id(record.flight_id)
        if flight is None:
            raise FlightNotFoundException(record.flight_id)
        return Booking.from_persistence(
            id=record.booking_id,
            passenger=passenger,
            flight=flight,
            status=record.status,
            created_at=record.created_at,
        )
