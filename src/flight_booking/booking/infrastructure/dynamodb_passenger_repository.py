import os

import boto3
from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from flight_booking.booking.domain.entity import Passenger
from flight_booking.booking.domain.repository import PassengerRepository
from flight_booking.booking.domain.value_object import PassengerId
from flight_booking.booking.infrastructure.dynamodb_id_generator import (
    DynamoDBIdGenerator,
)
from flight_booking.shared.domain.exception import DuplicateResourceException
from flight_booking.shared.utils.validators import not_none

logger = Logger(child=True)


class DynamoDBPassengerRepository(PassengerRepository):
    """DynamoDBを使用したPassengerRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)
        self.id_generator = DynamoDBIdGenerator(self.table)

    def save(self, passenger: Passenger) -> Passenger:
        """乗客をDBに保存する"""
        not_none(passenger, "Cannot save a null passenger.")
        is_new = passenger.id is None
        if is_new:
            passenger = Passenger.from_persistence(
                id=PassengerId(self.id_generator.next_id("PASSENGER")),
                name=passenger.name,
                email=passenger.email,
            )

        item = {
            "PK": f"PASSENGER#{passenger.id}",
            "SK": "PROFILE",
            "entity_type": "PASSENGER",
            "passenger_id": passenger.id.value,
            "name": passenger.name,
            "email": passenger.email,
        }
        kwargs: dict = {"Item": item}
        if is_new:
            kwargs["ConditionExpression"] = Attr("PK").not_exists()

        try:
            self.table.put_item(**kwargs)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException("Passenger", passenger.id) from e
            raise

        logger.debug("Passenger saved", extra={"passenger_id": str(passenger.id)})
        return passenger

    def find_by_id(self, passenger_id: PassengerId) -> Passenger | None:
        """乗客IDで検索"""
        not_none(passenger_id, "Passenger ID cannot be null when searching.")
        response = self.table.get_item(
            Key={"PK": f"PASSENGER#{passenger_id}", "SK": "PROFILE"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def _to_entity(self, item: dict) -> Passenger:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Passenger.from_persistence(
            id=PassengerId(int(item["passenger_id"])),
            name=item["name"],
            email=item["email"],
        )
