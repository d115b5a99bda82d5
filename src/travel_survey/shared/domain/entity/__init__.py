from .uuidable import Uuidable
from .weight_method import WeightMethod

__all__ = ["Uuidable", "WeightMethod"]
