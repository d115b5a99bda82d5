from .exceptions import DomainException, ParamValidationError

__all__ = ["DomainException", "ParamValidationError"]
