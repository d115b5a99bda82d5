from .entity import BaseSegment, BaseTrip, BaseVisitedPlace
from .enum import Activity, ActivityCategory
from .factory import BaseTripFactory, TripParams
from .value_object import BasePlace

__all__ = [
    "BaseTrip",
    "BaseSegment",
    "BaseVisitedPlace",
    "BasePlace",
    "Activity",
    "ActivityCategory",
    "BaseTripFactory",
    "TripParams",
]
