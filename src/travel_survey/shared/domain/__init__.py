from .entity import Uuidable, WeightMethod
from .exception import DomainException, ParamValidationError
from .value_object import Weight, validate_weights

__all__ = [
    "Uuidable",
    "WeightMethod",
    "DomainException",
    "ParamValidationError",
    "Weight",
    "validate_weights",
]
