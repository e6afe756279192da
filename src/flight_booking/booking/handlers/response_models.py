from __future__ import annotations

from pydantic import BaseModel

from flight_booking.booking.domain.entity import Booking


class FlightData(BaseModel):
    """フライトデータのレスポンスモデル"""

    flight_id: int
    origin: str
    destination: str
    departure_time: str
    capacity: int
    available_seats: int


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: int
    passenger_id: int
    passenger_name: str
    flight: FlightData
    status: str
    created_at: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: BookingData


class BookingListResponse(BaseModel):
    """予約一覧レスポンスモデル"""

    status: str = "success"
    bookings: list[BookingData]
    count: int


def to_booking_data(booking: Booking) -> BookingData:
    """Booking エンティティをレスポンスモデルに変換する"""
    flight = booking.flight
    return BookingData(
        booking_id=booking.id.value,
        passenger_id=booking.passenger.id.value,
        passenger_name=booking.passenger.name,
        flight=FlightData(
            flight_id=flight.id.value,
            origin=flight.origin,
            destination=flight.destination,
            departure_time=str(flight.departure_time),
            capacity=flight.capacity,
            available_seats=flight.available_seats(),
        ),
        status=booking.status.value,
        created_at=str(booking.created_at),
    )


def to_response(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(data=to_booking_data(booking)).model_dump()


def to_list_response(bookings: list[Booking]) -> dict:
    """Booking エンティティの一覧をレスポンス辞書に変換する"""
    data = [to_booking_data(booking) for booking in bookings]
    return BookingListResponse(bookings=data, count=len(data)).model_dump()
