"""Static, hand-authored content the builders select from."""

from .exercises import HOME_EXERCISES, GYM_EXERCISES
from .meals import MEALS, MEAL_SWAPS
from .habits import CORE_HABITS, OPTIONAL_HABITS

__all__ = [
    'HOME_EXERCISES',
    'GYM_EXERCISES',
    'MEALS',
    'MEAL_SWAPS',
    'CORE_HABITS',
    'OPTIONAL_HABITS',
]
