from pydantic import BaseModel, Field


class CreateBookingRequest(BaseModel):
    """予約作成リクエストスキーマ"""

    passenger_id: int = Field(
        ...,
        gt=0,
        description="乗客ID",
        examples=[101],
    )

    flight_id: int = Field(
        ...,
        gt=0,
        description="フライトID",
        examples=[467],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "passenger_id": 101,
                    "flight_id": 467,
                }
            ]
        }
    }


class CancelBookingRequest(BaseModel):
    """予約キャンセルリクエストモデル（パスパラメータ）"""

    booking_id: int = Field(..., gt=0, description="予約ID")
