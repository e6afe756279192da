from enum import Enum


class BookingStatus(str, Enum):
    """予約ステータス

    CONFIRMED → CANCELLED の一方向のみ遷移する。
    """

    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
