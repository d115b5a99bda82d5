from .visited_place_attributes import Activity, ActivityCategory

__all__ = ["Activity", "ActivityCategory"]
