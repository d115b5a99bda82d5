from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Any

from travel_survey.shared.domain.entity import WeightMethod
from travel_survey.shared.domain.exception import ParamValidationError


@dataclass(frozen=True)
class Weight:
    """統計的な重み（重み値 + 算出手法）

    method は共有参照として保持し、コピーしない。
    """

    weight: float
    method: WeightMethod


def validate_weights(
    weights: Any, display_name: str = "Weightable"
) -> list[ParamValidationError]:
    """_weights の構造を検証する（送出せずエラーを返す）"""
    errors: list[ParamValidationError] = []
    if weights is None:
        return errors

    prefix = f"{display_name} validateWeights: _weights"
    if not isinstance(weights, list):
        errors.append(ParamValidationError(f"{prefix} should be an array"))
        return errors

    for i, entry in enumerate(weights):
        if not isinstance(entry, Weight):
            errors.append(
                ParamValidationError(f"{prefix} index {i} should be an instance of Weight")
            )
            continue
        if not _is_positive_number(entry.weight):
            errors.append(
                ParamValidationError(f"{prefix} index {i} weight should be a positive number")
            )
        if not isinstance(entry.method, WeightMethod):
            errors.append(
                ParamValidationError(
                    f"{prefix} index {i} method should be an instance of WeightMethod"
                )
            )
    return errors


def _is_positive_number(v: object) -> bool:
    # bool は int のサブクラスなので除外する
    return isinstance(v, Real) and not isinstance(v, bool) and v > 0
