from .base_trip_factory import BaseTripFactory, TripParams

__all__ = ["BaseTripFactory", "TripParams"]
