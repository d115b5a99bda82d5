from .base_place import BasePlace

__all__ = ["BasePlace"]
