from dataclasses import dataclass


@dataclass(frozen=True)
class EntityId:
    """ストアが採番する数値ID（1以上）"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"ID must be an integer: {self.value!r}")
        if self.value <= 0:
            raise ValueError(f"ID must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)
