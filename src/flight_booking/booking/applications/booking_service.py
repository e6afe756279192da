from aws_lambda_powertools import Logger

from flight_booking.booking.domain.entity import Booking
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
from flight_booking.shared.utils.validators import not_none

logger = Logger(child=True)


class BookingService:
    """フライト予約のユースケース（予約作成・キャンセル・一覧）

    ストアは集約のスナップショットを保持するため、
    座席数・ステータスの変更は明示的に書き戻す。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        passenger_repository: PassengerRepository,
        flight_repository: FlightRepository,
    ) -> None:
        self._booking_repository = booking_repository
        self._passenger_repository = passenger_repository
        self._flight_repository = flight_repository

    def create_booking(
        self,
        passenger_id: PassengerId,
        flight_id: FlightId,
        current_time: IsoDateTime,
    ) -> Booking:
        """座席を確保して予約を作成する

        乗客検索 → フライト検索 → 座席確保 → 予約生成 → 永続化 の順に実行し、
        途中で失敗した場合は以降の処理を行わない。
        """
        not_none(passenger_id, "Passenger ID is required to create a booking.")
        not_none(flight_id, "Flight ID is required to create a booking.")
        not_none(current_time, "Current time is required to create a booking.")

        passenger = self._passenger_repository.find_by_id(passenger_id)
        if passenger is None:
            raise PassengerNotFoundException(passenger_id)

        flight = self._flight_repository.find_by_id(flight_id)
        if flight is None:
            raise FlightNotFoundException(flight_id)

        expected_occupied_seats = flight.occupied_seats
        flight.reserve_seat(current_time)
        booking = Booking.create(passenger, flight, current_time)

        # 座席数の書き戻しと予約の保存は別トランザクション。
        # 予約の保存に失敗した場合、確保済みの座席は外部で整合させる必要がある。
        self._flight_repository.update(
            flight, expected_occupied_seats=expected_occupied_seats
        )
        saved_booking = self._booking_repository.save(booking)

        logger.info(
            "Booking created",
            extra={
                "booking_id": str(saved_booking.id),
                "passenger_id": str(passenger_id),
                "flight_id": str(flight_id),
                "available_seats": flight.available_seats(),
            },
        )
        return saved_booking

    def cancel_booking(
        self, booking_id: BookingId, current_time: IsoDateTime
    ) -> Booking:
        """予約をキャンセルし、座席を解放する"""
        not_none(current_time, "Current time is required to cancel a booking.")

        booking = self._booking_repository.find_by_id(booking_id)
        if booking is None:
            raise BookingNotFoundException(booking_id)

        expected_status = booking.status
        booking.cancel(current_time)

        # CANCELLED は終端状態のため、ステータスの compare-and-swap に成功した
        # 呼び出しだけが座席を解放する。
        self._booking_repository.update(booking, expected_status=expected_status)
        # 座席の解放は保存済みの現在値に対する差分更新。
        # 解放に失敗した場合、座席は確保されたまま残る（定員超過にはならない）。
        self._flight_repository.release_seat(booking.flight.id)

        logger.info(
            "Booking cancelled",
            extra={
                "booking_id": str(booking.id),
                "flight_id": str(booking.flight.id),
            },
        )
        return booking

    def list_bookings(self) -> list[Booking]:
        """全ての予約を取得する"""
        return self._booking_repository.find_all()
