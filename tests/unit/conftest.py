from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from flight_booking.booking.domain.entity import Booking, Flight, Passenger
from flight_booking.booking.domain.enum import BookingStatus
from flight_booking.booking.domain.value_object import BookingId, FlightId, PassengerId
from flight_booking.shared.domain import IsoDateTime

FIXED_NOW = datetime(2026, 1, 10, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """全テスト共通の現在時刻フィクスチャ"""
    return IsoDateTime(FIXED_NOW)


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def create_passenger():
    """Passenger を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        passenger_id: int | None = 101,
        name: str = "Taro Yamada",
        email: str = "taro@example.com",
    ) -> Passenger:
        return Passenger(
            id=PassengerId(passenger_id) if passenger_id is not None else None,
            name=name,
            email=email,
        )

    return _factory


@pytest.fixture
def create_flight(now):
    """Flight を生成する Factory fixture

    departure_in は現在時刻からの出発までの時間（負の値なら出発済み）。
    """

    def _factory(
        flight_id: int | None = 467,
        origin: str = "HND",
        destination: str = "CTS",
        capacity: int = 100,
        occupied_seats: int = 0,
        departure_in: timedelta = timedelta(days=5),
    ) -> Flight:
        return Flight(
            id=FlightId(flight_id) if flight_id is not None else None,
            origin=origin,
            destination=destination,
            capacity=capacity,
            occupied_seats=occupied_seats,
            departure_time=IsoDateTime(now.value + departure_in),
        )

    return _factory


@pytest.fixture
def create_booking(now, create_passenger, create_flight):
    """Booking を生成する Factory fixture

    CONFIRMED の予約は座席1つを使用している状態のフライトを参照する。
    """

    def _factory(
        booking_id: int | None = 1,
        status: BookingStatus = BookingStatus.CONFIRMED,
        passenger: Passenger | None = None,
        flight: Flight | None = None,
    ) -> Booking:
        if flight is None:
            occupied = 1 if status == BookingStatus.CONFIRMED else 0
            flight = create_flight(occupied_seats=occupied)
        return Booking(
            id=BookingId(booking_id) if booking_id is not None else None,
            passenger=passenger or create_passenger(),
            flight=flight,
            status=status,
            created_at=now,
        )

    return _factory
