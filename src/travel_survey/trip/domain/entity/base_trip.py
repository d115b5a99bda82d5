from collections.abc import Mapping
from typing import Any

from travel_survey.shared.domain import ParamValidationError, Uuidable, Weight
from travel_survey.trip.domain.entity.base_segment import BaseSegment
from travel_survey.trip.domain.entity.base_visited_place import BaseVisitedPlace


class BaseTrip(Uuidable):
    """トリップ（出発地から目的地までの移動）

    - コンストラクタは値を組み立てるだけで検証しない
    - 定義外の属性は extended_attributes として保持する（検証対象外）
    - 出発地/目的地/区間は参照を保持するのみで、ライフサイクルは管理しない
    """

    def __init__(
        self,
        uuid: str | None = None,
        weights: list[Weight] | None = None,
        base_origin: BaseVisitedPlace | None = None,
        base_destination: BaseVisitedPlace | None = None,
        base_segments: list[BaseSegment] | None = None,
        extended_attributes: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(uuid)
        self._weights = weights
        self._base_origin = base_origin
        self._base_destination = base_destination
        self._base_segments = base_segments if base_segments is not None else []
        self._extended_attributes = dict(extended_attributes or {})

    @property
    def weights(self) -> list[Weight] | None:
        return self._weights

    @property
    def base_origin(self) -> BaseVisitedPlace | None:
        return self._base_origin

    @property
    def base_destination(self) -> BaseVisitedPlace | None:
        return self._base_destination

    @property
    def base_segments(self) -> list[BaseSegment]:
        return self._base_segments

    @property
    def extended_attributes(self) -> dict[str, Any]:
        return dict(self._extended_attributes)

    @staticmethod
    def validate_params(params: Any) -> list[ParamValidationError]:
        """未検証の入力の構造を検証し、エラーを順に返す

        送出はしない。各値は型のみを確認し、入れ子のオブジェクト自体の
        妥当性までは検証しない。
        """
        if params is None:
            return []
        if not isinstance(params, Mapping):
            return [ParamValidationError("BaseTrip validateParams: params should be an object")]

        errors = Uuidable.validate_params(params)

        base_origin = params.get("baseOrigin")
        if base_origin is not None and not isinstance(base_origin, BaseVisitedPlace):
            errors.append(
                ParamValidationError("BaseTrip validateParams: baseOrigin should be an object")
            )

        base_destination = params.get("baseDestination")
        if base_destination is not None and not isinstance(
            base_destination, BaseVisitedPlace
        ):
            errors.append(
                ParamValidationError(
                    "BaseTrip validateParams: baseDestination should be an object"
                )
            )

        base_segments = params.get("baseSegments")
        if base_segments is not None:
            if not isinstance(base_segments, list):
                errors.append(
                    ParamValidationError(
                        "BaseTrip validateParams: baseSegments should be an array"
                    )
                )
            else:
                for i, segment in enumerate(base_segments):
                    if not isinstance(segment, BaseSegment):
                        errors.append(
                            ParamValidationError(
                                f"BaseTrip validateParams: baseSegments at index {i} "
                                "should be an instance of BaseSegment"
                            )
                        )

        return errors
