from dataclasses import dataclass

from .entity_id import EntityId


@dataclass(frozen=True)
class BookingId(EntityId):
    """予約ID"""
