import base64
import importlib
import json
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from flight_booking.booking.applications import BookingService
from flight_booking.booking.domain.entity import Flight, Passenger
from flight_booking.booking.infrastructure import (
    InMemoryBookingRepository,
    InMemoryFlightRepository,
    InMemoryPassengerRepository,
)
from flight_booking.shared.domain import IsoDateTime


@dataclass
class FakeLambdaContext:
    """Logger.inject_lambda_context が参照する属性のみを持つ LambdaContext"""

    function_name: str = "flight-booking-test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:flight-booking-test"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def repositories():
    passengers = InMemoryPassengerRepository()
    flights = InMemoryFlightRepository()
    bookings = InMemoryBookingRepository(passengers, flights)
    return passengers, flights, bookings


@pytest.fixture
def in_memory_service(repositories):
    passengers, flights, bookings = repositories
    return BookingService(
        booking_repository=bookings,
        passenger_repository=passengers,
        flight_repository=flights,
    )


@pytest.fixture
def seed(repositories):
    """乗客1名と、出発前・出発済みのフライトを登録する

    ハンドラーは実時刻を使うため、出発時刻は現在時刻からの相対で決める。
    """
    passengers, flights, _ = repositories
    now = datetime.now(timezone.utc)
    passenger = passengers.save(Passenger.create("Taro Yamada", "taro@example.com"))
    upcoming = flights.save(
        Flight.create("HND", "CTS", 2, IsoDateTime(now + timedelta(days=5)))
    )
    departed = flights.save(
        Flight.create("HND", "FUK", 2, IsoDateTime(now - timedelta(days=5)))
    )
    return {"passenger": passenger, "upcoming": upcoming, "departed": departed}


@pytest.fixture
def load_handler(monkeypatch, in_memory_service):
    """ハンドラーモジュールを読み込み、サービスをインメモリ実装に差し替える"""

    def _load(module_name: str, service=None):
        monkeypatch.setenv("TABLE_NAME", "flight-booking-test")
        with patch("boto3.resource"):
            module = importlib.import_module(
                f"flight_booking.booking.handlers.{module_name}"
            )
        monkeypatch.setattr(module, "service", service or in_memory_service)
        return module

    return _load


@pytest.fixture
def api_event():
    """API Gateway (HTTP API) のイベントを生成する Factory fixture"""

    def _factory(body=None, path_parameters=None, base64_encoded=False) -> dict:
        event = {
            "version": "2.0",
            "routeKey": "$default",
            "rawPath": "/bookings",
            "headers": {"content-type": "application/json"},
            "requestContext": {"http": {"method": "POST", "path": "/bookings"}},
            "isBase64Encoded": base64_encoded,
        }
        if body is not None:
            text = body if isinstance(body, str) else json.dumps(body)
            event["body"] = (
                base64.b64encode(text.encode()).decode() if base64_encoded else text
            )
        if path_parameters is not None:
            event["pathParameters"] = path_parameters
        return event

    return _factory
