"""ドメインの事前条件チェック

エンティティの生成時・状態変更時に不変条件を検証する。
違反時は ValueError を送出する（状態は持たない）。
"""

from collections.abc import Collection
from numbers import Real


def not_none(value: object, message: str) -> None:
    if value is None:
        raise ValueError(message)


def not_blank(value: str | None, message: str) -> None:
    """None・空文字・空白のみの文字列を拒否する"""
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValueError(message)


def is_positive(value: Real | None, message: str) -> None:
    if value is None or value <= 0:
        raise ValueError(message)


def is_greater_than(value: Real | None, threshold: Real | None, message: str) -> None:
    if value is None or threshold is None or value <= threshold:
        raise ValueError(message)


def is_greater_or_equal_than(
    value: Real | None, threshold: Real | None, message: str
) -> None:
    if value is None or threshold is None or value < threshold:
        raise ValueError(message)


def not_empty(collection: Collection | None, message: str) -> None:
    if collection is None or len(collection) == 0:
        raise ValueError(message)
