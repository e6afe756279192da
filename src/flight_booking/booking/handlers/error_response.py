from pydantic import ValidationError

from flight_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
)
from flight_booking.shared.utils import error_response

# 上から順に判定する（サブクラスを先に並べる）
_STATUS_CODES: list[tuple[type[Exception], int]] = [
    (ResourceNotFoundException, 404),
    (OptimisticLockException, 409),
    (DuplicateResourceException, 409),
    (BusinessRuleViolationException, 409),
    (ValueError, 400),
]


def is_client_error(error: Exception) -> bool:
    """4xx に変換できる例外かどうか"""
    return isinstance(error, ValidationError) or any(
        isinstance(error, exc_type) for exc_type, _ in _STATUS_CODES
    )


def to_error_response(error: Exception) -> dict:
    """ドメイン例外・入力エラーを API Gateway のエラーレスポンスに変換する"""
    if isinstance(error, ValidationError):
        return error_response(
            400,
            "ValidationError",
            "Invalid request",
            errors=error.errors(include_url=False),
        )

    for exc_type, status_code in _STATUS_CODES:
        if isinstance(error, exc_type):
            return error_response(status_code, type(error).__name__, str(error))

    return error_response(500, "InternalServerError", "Internal server error")
