"""Habit catalog: the core list every plan gets plus the conditional extras."""

from typing import List

from ..constants import HabitCategory
from ..models import Habit


CORE_HABITS: List[Habit] = [
    Habit(
        id="hydration",
        title="Water 2L",
        description="Drink at least 8 glasses of water spread across the day.",
        category=HabitCategory.HYDRATION,
    ),
    Habit(
        id="sleep-hygiene",
        title="Sleep 7+ h",
        description="Keep a fixed bedtime and wake-up time, at least 7 hours of sleep.",
        category=HabitCategory.SLEEP,
    ),
    Habit(
        id="walk",
        title="Walk 6k steps",
        description="Plan two shorter 15-minute walks.",
        category=HabitCategory.MOBILITY,
    ),
    Habit(
        id="nsdr",
        title="NSDR / breathing",
        description="Pick a guided NSDR audio (5, 10 or 20 min) to match your energy.",
        category=HabitCategory.MINDFULNESS,
    ),
    Habit(
        id="protein",
        title="Protein with every meal",
        description="Include a quality protein source in all three main meals.",
        category=HabitCategory.NUTRITION,
    ),
]

OPTIONAL_HABITS: List[Habit] = [
    Habit(
        id="fiber",
        title="Vegetables 2x",
        description="Add vegetables to at least two meals today.",
        category=HabitCategory.NUTRITION,
    ),
    Habit(
        id="gratitude",
        title="Short gratitude",
        description="Write down 3 things you are grateful for before bed.",
        category=HabitCategory.MINDFULNESS,
    ),
    Habit(
        id="mobility-reset",
        title="Mobility 10 min",
        description="A mobility circuit for the hips and thoracic spine (10 minutes).",
        category=HabitCategory.MOBILITY,
    ),
]
