from __future__ import annotations

from flight_booking.booking.domain.value_object import PassengerId
from flight_booking.shared.domain import Entity
from flight_booking.shared.utils.validators import not_blank, not_none


class Passenger(Entity[PassengerId]):
    """乗客エンティティ（生成後は不変）"""

    def __init__(self, id: PassengerId | None, name: str, email: str) -> None:
        not_blank(name, "Passenger name cannot be empty or blank.")
        not_blank(email, "Passenger email cannot be empty or blank.")
        super().__init__(id)
        self._name = name
        self._email = email

    @classmethod
    def create(cls, name: str, email: str) -> Passenger:
        """未永続化の乗客を生成する"""
        return cls(id=None, name=name, email=email)

    @classmethod
    def from_persistence(cls, id: PassengerId, name: str, email: str) -> Passenger:
        """永続化済みデータから復元する"""
        not_none(id, "Passenger ID must be provided.")
        return cls(id=id, name=name, email=email)

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    def __repr__(self) -> str:
        return f"Passenger(id={self.id}, name={self._name!r}, email={self._email!r})"
