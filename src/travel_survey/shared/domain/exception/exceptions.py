class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ParamValidationError(DomainException):
    """パラメータの構造エラー

    validate_params から返されるエラーオブジェクト。送出はしない。
    """

    pass
