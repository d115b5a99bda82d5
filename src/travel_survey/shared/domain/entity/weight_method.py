from travel_survey.shared.domain.entity.uuidable import Uuidable


class WeightMethod(Uuidable):
    """重み付け手法（統計的な重みの算出方法）"""

    def __init__(
        self,
        shortname: str,
        name: str,
        description: str | None = None,
        uuid: str | None = None,
    ) -> None:
        super().__init__(uuid)
        self._shortname = shortname
        self._name = name
        self._description = description

    @property
    def shortname(self) -> str:
        return self._shortname

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str | None:
        return self._description
