from dataclasses import dataclass

from .entity_id import EntityId


@dataclass(frozen=True)
class PassengerId(EntityId):
    """乗客ID"""
