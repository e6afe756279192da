import os

import boto3
from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from flight_booking.booking.domain.entity import Flight
from flight_booking.booking.domain.exception import (
    EmptyFlightSeatReleaseException,
    FlightNotFoundException,
)
from flight_booking.booking.domain.repository import FlightRepository
from flight_booking.booking.domain.value_object import FlightId
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


class DynamoDBFlightRepository(FlightRepository):
    """DynamoDBを使用したFlightRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)
        self.id_generator = DynamoDBIdGenerator(self.table)

    def save(self, flight: Flight) -> Flight:
        """フライトをDBに保存する"""
        not_none(flight, "Cannot save a null flight.")
        is_new = flight.id is None
        if is_new:
            flight = Flight.from_persistence(
                id=FlightId(self.id_generator.next_id("FLIGHT")),
                origin=flight.origin,
                destination=flight.destination,
                capacity=flight.capacity,
                occupied_seats=flight.occupied_seats,
                departure_time=flight.departure_time,
            )

        item = {
            "PK": f"FLIGHT#{flight.id}",
            "SK": "SCHEDULE",
            "entity_type": "FLIGHT",
            "flight_id": flight.id.value,
            "origin": flight.origin,
            "destination": flight.destination,
            "capacity": flight.capacity,
            "occupied_seats": flight.occupied_seats,
            "departure_time": str(flight.departure_time),
        }
        kwargs: dict = {"Item": item}
        if is_new:
            kwargs["ConditionExpression"] = Attr("PK").not_exists()

        try:
            self.table.put_item(**kwargs)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException("Flight", flight.id) from e
            raise

        logger.debug("Flight saved", extra={"flight_id": str(flight.id)})
        return flight

    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        """フライトIDで検索"""
        not_none(flight_id, "Flight ID cannot be null when searching.")
        response = self.table.get_item(
            Key={"PK": f"FLIGHT#{flight_id}", "SK": "SCHEDULE"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def update(
        self, flight: Flight, expected_occupied_seats: int | None = None
    ) -> None:
        """使用中座席数を条件付きで更新する"""
        not_none(flight, "Cannot update a null flight.")
        not_none(flight.id, "Cannot update a flight that has not been saved.")

        condition = Attr("PK").exists()
        if expected_occupied_seats is not None:
            condition = condition & Attr("occupied_seats").eq(expected_occupied_seats)

        try:
            self.table.update_item(
                Key={"PK": f"FLIGHT#{flight.id}", "SK": "SCHEDULE"},
                UpdateExpression="SET occupied_seats = :occupied_seats",
                ExpressionAttributeValues={":occupied_seats": flight.occupied_seats},
                ConditionExpression=condition,
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                if expected_occupied_seats is None:
                    raise FlightNotFoundException(flight.id) from e
                raise OptimisticLockException(
                    "Flight", flight.id, "occupied_seats", expected_occupied_seats
                ) from e
            raise

        logger.debug(
            "Flight seats updated",
            extra={
                "flight_id": str(flight.id),
                "occupied_seats": flight.occupied_seats,
            },
        )

    def release_seat(self, flight_id: FlightId) -> None:
        """使用中座席数をアトミックに1減らす（0 未満にはならない）"""
        not_none(flight_id, "Flight ID cannot be null when releasing a seat.")

        try:
            response = self.table.update_item(
                Key={"PK": f"FLIGHT#{flight_id}", "SK": "SCHEDULE"},
                UpdateExpression="ADD occupied_seats :delta",
                ConditionExpression=Attr("PK").exists()
                & Attr("occupied_seats").gt(0),
                ExpressionAttributeValues={":delta": -1},
                ReturnValues="UPDATED_NEW",
                ReturnValuesOnConditionCheckFailure="ALL_OLD",
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                # ALL_OLD 指定時、アイテムが存在すれば Item が返る
                if "Item" not in e.response:
                    raise FlightNotFoundException(flight_id) from e
                raise EmptyFlightSeatReleaseException(flight_id) from e
            raise

        logger.debug(
            "Flight seat released",
            extra={
                "flight_id": str(flight_id),
                "occupied_seats": int(response["Attributes"]["occupied_seats"]),
            },
        )

    def _to_entity(self, item: dict) -> Flight:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Flight.from_persistence(
            id=FlightId(int(item["flight_id"])),
            origin=item["origin"],
            destination=item["destination"],
            capacity=int(item["capacity"]),
            occupied_seats=int(item["occupied_seats"]),
            departure_time=IsoDateTime.from_string(item["departure_time"]),
        )
