import json


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def error_response(status_code: int, error: str, message: str, **details) -> dict:
    """エラーレスポンスを生成する

    body は {"status": "error", "error": <種別>, "message": <メッセージ>, ...} の形式。
    """
    body = {"status": "error", "error": error, "message": message, **details}
    return api_response(status_code, body)
