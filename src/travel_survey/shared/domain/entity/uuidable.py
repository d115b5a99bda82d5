from collections.abc import Mapping
from typing import Any
from uuid import uuid4

from travel_survey.shared.domain.exception import ParamValidationError
from travel_survey.shared.utils.validators import is_valid_uuid


class Uuidable:
    """UUID を識別子として持つオブジェクトの基底クラス

    - uuid が渡されなければ v4 UUID を生成する
    - コンストラクタでは検証しない（validate() で明示的に検証する）
    - 妥当性は未検証(None) / True / False の3状態をキャッシュする
    """

    def __init__(self, uuid: str | None = None) -> None:
        self._uuid = uuid if uuid is not None else str(uuid4())
        self._is_valid: bool | None = None

    @property
    def uuid(self) -> str:
        return self._uuid

    def is_valid(self) -> bool | None:
        """最後の validate() の結果。未検証なら None"""
        return self._is_valid

    def validate(self) -> bool:
        """妥当性を検証し、結果をキャッシュする"""
        self._is_valid = is_valid_uuid(self._uuid)
        return self._is_valid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Uuidable):
            return False
        return self._uuid == other._uuid

    def __hash__(self) -> int:
        return hash(self._uuid)

    @staticmethod
    def validate_params(params: Mapping[str, Any]) -> list[ParamValidationError]:
        """_uuid キーの構造を検証する"""
        errors: list[ParamValidationError] = []
        uuid = params.get("_uuid")
        if uuid is not None and not is_valid_uuid(uuid):
            errors.append(ParamValidationError("Uuidable validateParams: invalid uuid"))
        return errors
