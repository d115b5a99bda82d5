from travel_survey.shared.domain import Uuidable


class BaseSegment(Uuidable):
    """トリップの区間（同一交通手段で移動する部分）"""

    def __init__(
        self,
        uuid: str | None = None,
        mode_category: str | None = None,
        mode: str | None = None,
    ) -> None:
        super().__init__(uuid)
        self._mode_category = mode_category
        self._mode = mode

    @property
    def mode_category(self) -> str | None:
        return self._mode_category

    @property
    def mode(self) -> str | None:
        return self._mode
