from abc import abstractmethod

from flight_booking.booking.domain.entity import Booking
from flight_booking.booking.domain.enum import BookingStatus
from flight_booking.booking.domain.value_object import BookingId
from flight_booking.shared.domain import Repository


class BookingRepository(Repository[Booking, BookingId]):
    """フライト予約レポジトリ"""

    @abstractmethod
    def save(self, booking: Booking) -> Booking:
        """永続化する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Booking]:
        """全ての予約を取得する（順序はストア依存）"""
        raise NotImplementedError

    @abstractmethod
    def update(
        self, booking: Booking, expected_status: BookingStatus | None = None
    ) -> None:
        """予約のステータスを更新する"""
        raise NotImplementedError
