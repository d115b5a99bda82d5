from enum import Enum


class ActivityCategory(str, Enum):
    """活動カテゴリ"""

    HOME = "home"
    WORK = "work"
    SCHOOL = "school"
    SHOPPING_SERVICE_RESTAURANT = "shoppingServiceRestaurant"
    LEISURE = "leisure"
    ACCOMPANY = "accompany"
    OTHER = "other"


class Activity(str, Enum):
    """訪問先での活動"""

    HOME = "home"
    WORK_USUAL = "workUsual"
    WORK_NOT_USUAL = "workNotUsual"
    SCHOOL_USUAL = "schoolUsual"
    SHOPPING = "shopping"
    RESTAURANT = "restaurant"
    LEISURE_STROLL = "leisureStroll"
    LEISURE_SPORTS = "leisureSports"
    VISITING_FRIENDS = "visiting"
    DROP_FETCH_SOMEONE = "dropFetchSomeone"
    OTHER = "other"
