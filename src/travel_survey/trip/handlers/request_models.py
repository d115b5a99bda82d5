from typing import Any

from pydantic import BaseModel, Field


class ValidateTripRequest(BaseModel):
    """トリップ検証リクエストスキーマ"""

    trip: dict[str, Any] = Field(
        ...,
        description="調査データ形式のトリップ（キーは _uuid, baseOrigin など）",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "trip": {
                        "_uuid": "0b9e2a64-3f8e-4d6c-9a51-6f3c1d2e7b80",
                        "baseOrigin": {"activityCategory": "home"},
                        "baseDestination": {"activity": "leisureStroll"},
                        "baseSegments": [{"mode": "walk"}],
                    }
                }
            ]
        }
    }
