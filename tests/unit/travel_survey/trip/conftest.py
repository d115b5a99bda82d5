from datetime import date
from uuid import uuid4

import pytest

from travel_survey.shared.domain import Weight
from travel_survey.trip.domain import (
    Activity,
    ActivityCategory,
    BasePlace,
    BaseSegment,
    BaseVisitedPlace,
)


@pytest.fixture
def create_visited_place():
    """BaseVisitedPlace を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        uuid: str | None = None,
        arrival_time: int = 36000,
        departure_time: int = 39600,
    ) -> BaseVisitedPlace:
        return BaseVisitedPlace(
            uuid=uuid or str(uuid4()),
            base_place=BasePlace(),
            arrival_date=date(2023, 10, 1),
            departure_date=date(2023, 10, 1),
            arrival_time=arrival_time,
            departure_time=departure_time,
            activity_category=ActivityCategory.LEISURE,
            activity=Activity.LEISURE_STROLL,
        )

    return _factory


@pytest.fixture
def base_trip_attributes(valid_uuid, weight_method, create_visited_place) -> dict:
    """BaseTrip のコンストラクタ引数"""
    return {
        "uuid": valid_uuid,
        "weights": [Weight(weight=34.444, method=weight_method)],
        "base_origin": create_visited_place(),
        "base_destination": create_visited_place(),
        "base_segments": [BaseSegment(uuid=str(uuid4())), BaseSegment(uuid=str(uuid4()))],
    }
