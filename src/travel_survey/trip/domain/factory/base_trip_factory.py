from collections.abc import Mapping
from datetime import date
from enum import Enum
from typing import Any, TypedDict

from travel_survey.shared.domain import Weight, WeightMethod
from travel_survey.trip.domain.entity import BaseSegment, BaseTrip, BaseVisitedPlace
from travel_survey.trip.domain.enum import Activity, ActivityCategory
from travel_survey.trip.domain.value_object import BasePlace


class TripParams(TypedDict, total=False):
    """トリップの入力データ構造（調査データのキー名）"""

    _uuid: str
    _weights: list[Any]
    baseOrigin: Any
    baseDestination: Any
    baseSegments: Any


BASE_TRIP_KEYS = frozenset(TripParams.__optional_keys__)


class BaseTripFactory:
    """トリップファクトリ

    JSON 形式の入力を、ドメインオブジェクトを含むパラメータに変換する。
    変換できない値はそのまま残し、validate_params で報告させる。
    """

    def to_params(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """入力の入れ子の辞書をドメインオブジェクトに置き換える"""
        params = dict(payload)

        for key in ("baseOrigin", "baseDestination"):
            if isinstance(params.get(key), Mapping):
                params[key] = self._to_visited_place(params[key])

        segments = params.get("baseSegments")
        if isinstance(segments, list):
            params["baseSegments"] = [
                self._to_segment(s) if isinstance(s, Mapping) else s for s in segments
            ]

        weights = params.get("_weights")
        if isinstance(weights, list):
            params["_weights"] = [self._to_weight(w) for w in weights]

        return params

    def create(self, params: Mapping[str, Any]) -> BaseTrip:
        """変換済みパラメータから BaseTrip を生成する（検証はしない）"""
        extended = {k: v for k, v in params.items() if k not in BASE_TRIP_KEYS}
        return BaseTrip(
            uuid=params.get("_uuid"),
            weights=params.get("_weights"),
            base_origin=params.get("baseOrigin"),
            base_destination=params.get("baseDestination"),
            base_segments=params.get("baseSegments"),
            extended_attributes=extended,
        )

    def _to_visited_place(self, data: Mapping[str, Any]) -> BaseVisitedPlace:
        base_place = data.get("basePlace")
        if isinstance(base_place, Mapping):
            base_place = BasePlace(
                name=base_place.get("name"),
                geography=base_place.get("geography"),
            )
        return BaseVisitedPlace(
            uuid=data.get("_uuid"),
            base_place=base_place,
            arrival_date=_to_date(data.get("arrivalDate")),
            departure_date=_to_date(data.get("departureDate")),
            arrival_time=data.get("arrivalTime"),
            departure_time=data.get("departureTime"),
            activity_category=_to_enum(ActivityCategory, data.get("activityCategory")),
            activity=_to_enum(Activity, data.get("activity")),
        )

    def _to_segment(self, data: Mapping[str, Any]) -> BaseSegment:
        return BaseSegment(
            uuid=data.get("_uuid"),
            mode_category=data.get("modeCategory"),
            mode=data.get("mode"),
        )

    def _to_weight(self, data: Any) -> Any:
        if not isinstance(data, Mapping) or not isinstance(data.get("method"), Mapping):
            return data
        method = data["method"]
        return Weight(
            weight=data.get("weight"),
            method=WeightMethod(
                uuid=method.get("_uuid"),
                shortname=method.get("shortname"),
                name=method.get("name"),
                description=method.get("description"),
            ),
        )


def _to_date(v: Any) -> Any:
    """ISO 8601 の日付文字列を date に変換する。変換できなければそのまま返す"""
    if not isinstance(v, str):
        return v
    try:
        return date.fromisoformat(v)
    except ValueError:
        return v


def _to_enum(enum_cls: type[Enum], v: Any) -> Any:
    try:
        return enum_cls(v) if v is not None else None
    except ValueError:
        return v
