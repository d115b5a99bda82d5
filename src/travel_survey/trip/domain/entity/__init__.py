from .base_segment import BaseSegment
from .base_trip import BaseTrip
from .base_visited_place import BaseVisitedPlace

__all__ = ["BaseSegment", "BaseTrip", "BaseVisitedPlace"]
