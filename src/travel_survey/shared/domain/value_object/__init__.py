from .weight import Weight, validate_weights

__all__ = ["Weight", "validate_weights"]
