from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from travel_survey.shared.domain import ParamValidationError
from travel_survey.trip.domain import BaseTrip


class TripValidationData(BaseModel):
    """検証済みトリップのレスポンスモデル"""

    uuid: str
    is_valid: bool | None
    segment_count: int
    extended_attributes: dict[str, Any]


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: TripValidationData


class InvalidResponse(BaseModel):
    """パラメータエラーのレスポンスモデル"""

    status: str = "invalid"
    errors: list[str]


def to_response(trip: BaseTrip) -> dict:
    """BaseTrip をレスポンス辞書に変換する"""
    return SuccessResponse(
        data=TripValidationData(
            uuid=trip.uuid,
            is_valid=trip.is_valid(),
            segment_count=len(trip.base_segments),
            extended_attributes=trip.extended_attributes,
        )
    ).model_dump()


def to_error_response(errors: list[ParamValidationError]) -> dict:
    return InvalidResponse(errors=[str(e) for e in errors]).model_dump()
