from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from travel_survey.shared.domain import ParamValidationError, validate_weights
from travel_survey.trip.domain import BaseTrip, BaseTripFactory


@dataclass(frozen=True)
class TripValidation:
    """トリップ検証結果

    パラメータエラーがあれば trip は None。
    """

    trip: BaseTrip | None
    errors: list[ParamValidationError] = field(default_factory=list)


class ValidateTripService:
    """トリップ検証サービス"""

    def __init__(self, factory: BaseTripFactory) -> None:
        self._factory = factory

    def validate(self, payload: Mapping[str, Any]) -> TripValidation:
        """入力を検証し、問題がなければトリップを生成して妥当性を確定する"""
        params = self._factory.to_params(payload)

        errors = BaseTrip.validate_params(params)
        errors.extend(validate_weights(params.get("_weights"), "BaseTrip"))
        if errors:
            return TripValidation(trip=None, errors=errors)

        trip = self._factory.create(params)
        trip.validate()
        return TripValidation(trip=trip)
