from datetime import date

from travel_survey.shared.domain import Uuidable
from travel_survey.trip.domain.enum import Activity, ActivityCategory
from travel_survey.trip.domain.value_object import BasePlace


class BaseVisitedPlace(Uuidable):
    """訪問先（場所 + 到着/出発日時 + 活動）

    arrival_time / departure_time は0時からの経過秒数。
    """

    def __init__(
        self,
        uuid: str | None = None,
        base_place: BasePlace | None = None,
        arrival_date: date | None = None,
        departure_date: date | None = None,
        arrival_time: int | None = None,
        departure_time: int | None = None,
        activity_category: ActivityCategory | None = None,
        activity: Activity | None = None,
    ) -> None:
        super().__init__(uuid)
        self._base_place = base_place
        self._arrival_date = arrival_date
        self._departure_date = departure_date
        self._arrival_time = arrival_time
        self._departure_time = departure_time
        self._activity_category = activity_category
        self._activity = activity

    @property
    def base_place(self) -> BasePlace | None:
        return self._base_place

    @property
    def arrival_date(self) -> date | None:
        return self._arrival_date

    @property
    def departure_date(self) -> date | None:
        return self._departure_date

    @property
    def arrival_time(self) -> int | None:
        return self._arrival_time

    @property
    def departure_time(self) -> int | None:
        return self._departure_time

    @property
    def activity_category(self) -> ActivityCategory | None:
        return self._activity_category

    @property
    def activity(self) -> Activity | None:
        return self._activity
