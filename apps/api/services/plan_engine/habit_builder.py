"""
Habit Plan Builder

Core habits always apply. Gratitude is added under high stress and the
mobility reset when sleep is short.
"""

from typing import Optional, Sequence

from .catalog import CORE_HABITS, OPTIONAL_HABITS
from .constants import HIGH_STRESS_THRESHOLD, MIN_RESTFUL_SLEEP_HOURS, WEEKLY_CHALLENGE
from .models import Habit, HabitPlan, UserProfile


def _optional(habit_id: str, optional_habits: Sequence[Habit]) -> Optional[Habit]:
    return next((h for h in optional_habits if h.id == habit_id), None)


def build_habit_plan(
    profile: UserProfile,
    core_habits: Optional[Sequence[Habit]] = None,
    optional_habits: Optional[Sequence[Habit]] = None,
) -> HabitPlan:
    core = CORE_HABITS if core_habits is None else core_habits
    extras = OPTIONAL_HABITS if optional_habits is None else optional_habits

    habits = list(core)
    wanted = []
    if profile.stress_level >= HIGH_STRESS_THRESHOLD:
        wanted.append("gratitude")
    if profile.sleep_hours < MIN_RESTFUL_SLEEP_HOURS:
        wanted.append("mobility-reset")

    for habit_id in wanted:
        habit = _optional(habit_id, extras)
        if habit is not None:
            habits.append(habit)

    return HabitPlan(daily_habits=habits, weekly_challenge=WEEKLY_CHALLENGE)
