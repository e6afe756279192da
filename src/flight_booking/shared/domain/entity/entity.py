from abc import ABC
from typing import Generic, TypeVar

ID = TypeVar("ID")


class Entity(ABC, Generic[ID]):
    """Entity 基底クラス

    - 永続化前のエンティティは ID を持たない（None）
    - 同じ ID を持つエンティティ同士は他の属性に関係なく等しい
    - ID を持たないエンティティは自分自身とのみ等しい
    """

    def __init__(self, id: ID | None) -> None:
        self._id = id

    @property
    def id(self) -> ID | None:
        return self._id

    @property
    def is_persisted(self) -> bool:
        """永続化済み（ID 採番済み）かどうか"""
        return self._id is not None

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Entity):
            return False
        if self._id is None or other._id is None:
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        if self._id is None:
            return object.__hash__(self)
        return hash(self._id)
