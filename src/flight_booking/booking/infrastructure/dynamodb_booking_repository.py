import os

import boto3
from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

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
from flight_booking.booking.infrastructure.dynamodb_id_generator import (
    DynamoDBIdGenerator,
)
from flight_booking.shared.domain import IsoDateTime
from flight_booking.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
)
from flight_booking.shared.utils.validators import not_none

logger = Logger(child=True)


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    予約アイテムは乗客・フライトを ID で参照し、取得時に各レポジトリから復元する。
    """

    def __init__(
        self,
        passenger_repository: PassengerRepository,
        flight_repository: FlightRepository,
        table_name: str | None = None,
    ) -> None:
        self.passenger_repository = passenger_repository
        self.flight_repository = flight_repository
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)
        self.id_generator = DynamoDBIdGenerator(self.table)

    def save(self, booking: Booking) -> Booking:
        """予約をDBに保存する"""
        not_none(booking, "Cannot save a null booking.")
        not_none(booking.passenger.id, "Booking must reference a saved passenger.")
        not_none(booking.flight.id, "Booking must reference a saved flight.")
        is_new = booking.id is None
        if is_new:
            booking = Booking.from_persistence(
                id=BookingId(self.id_generator.next_id("BOOKING")),
                passenger=booking.passenger,
                flight=booking.flight,
                status=booking.status,
                created_at=booking.created_at,
            )

        item = {
            "PK": f"BOOKING#{booking.id}",
            "SK": "BOOKING",
            "entity_type": "BOOKING",
            "booking_id": booking.id.value,
            "passenger_id": booking.passenger.id.value,
            "flight_id": booking.flight.id.value,
            "status": booking.status.value,
            "created_at": str(booking.created_at),
            "GSI1PK": "BOOKINGS",
            "GSI1SK": f"BOOKING#{booking.created_at}#{booking.id}",
        }
        kwargs: dict = {"Item": item}
        if is_new:
            kwargs["ConditionExpression"] = Attr("PK").not_exists()

        try:
            self.table.put_item(**kwargs)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException("Booking", booking.id) from e
            raise

        logger.debug("Booking saved", extra={"booking_id": str(booking.id)})
        return booking

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        not_none(booking_id, "Booking ID cannot be null when searching.")
        response = self.table.get_item(
            Key={"PK": f"BOOKING#{booking_id}", "SK": "BOOKING"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_all(self) -> list[Booking]:
        """GSI1 から全ての予約を取得する（作成日時順）"""
        kwargs: dict = {
            "IndexName": "GSI1",
            "KeyConditionExpression": Key("GSI1PK").eq("BOOKINGS"),
        }
        items: list[dict] = []
        while True:
            response = self.table.query(**kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            kwargs["ExclusiveStartKey"] = last_key

        return [self._to_entity(item) for item in items]

    def update(
        self, booking: Booking, expected_status: BookingStatus | None = None
    ) -> None:
        """予約のステータスを更新する"""
        not_none(booking, "Cannot update a null booking.")
        not_none(booking.id, "Cannot update a booking that has not been saved.")

        kwargs: dict = {
            "Key": {"PK": f"BOOKING#{booking.id}", "SK": "BOOKING"},
            "UpdateExpression": "SET #status = :status",
            "ExpressionAttributeNames": {"#status": "status"},
            "ExpressionAttributeValues": {":status": booking.status.value},
            "ConditionExpression": Attr("PK").exists(),
        }
        if expected_status is not None:
            kwargs["ConditionExpression"] = Attr("PK").exists() & Attr("status").eq(
                expected_status.value
            )

        try:
            self.table.update_item(**kwargs)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                if expected_status is None:
                    raise BookingNotFoundException(booking.id) from e
                raise OptimisticLockException(
                    "Booking", booking.id, "status", expected_status.value
                ) from e
            raise

        logger.debug(
            "Booking status updated",
            extra={"booking_id": str(booking.id), "status": booking.status.value},
        )

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        passenger_id = PassengerId(int(item["passenger_id"]))
        passenger = self.passenger_repository.find_by_id(passenger_id)
        if passenger is None:
            raise PassengerNotFoundException(passenger_id)

        flight_id = FlightId(int(item["flight_id"]))
        flight = self.flight_repository.find_by_id(flight_id)
        if flight is None:
            raise FlightNotFoundException(flight_id)

        return Booking.from_persistence(
            id=BookingId(int(item["booking_id"])),
            passenger=passenger,
            flight=flight,
            status=BookingStatus(item["status"]),
            created_at=IsoDateTime.from_string(item["created_at"]),
        )
