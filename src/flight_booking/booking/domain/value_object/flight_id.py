from dataclasses import dataclass

from .entity_id import EntityId


@dataclass(frozen=True)
class FlightId(EntityId):
    """フライトID"""
