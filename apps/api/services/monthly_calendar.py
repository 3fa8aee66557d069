"""
Monthly Calendar Service

Projects a generated plan and the member's completion logs onto a
Monday-start calendar covering the subscription window.

Design Principles:
- Derived, never stored: recomputed on every request
- Rotation is anchored to the subscription start, not the calendar row
- Future days never read logs
- Every day carries meal/habit arrays, even outside the window
"""

from datetime import date
from typing import Dict, List, Mapping, Optional
import logging

from services.plan_engine.constants import DAY_LABELS
from services.plan_engine.dates import add_days, to_local_iso_date, weekday_index
from services.plan_engine.models import (
    CalendarData,
    CalendarDaySummary,
    CalendarWorkoutSummary,
    CompletionItem,
    DailyLog,
    DailyNutritionPlan,
    GeneratedPlan,
    NutritionPlan,
    TrainingPlan,
)

logger = logging.getLogger(__name__)


def rotation_index_for(day: date, subscription_start: date) -> int:
    """
    Rotation slot of ``day``: the start's weekday plus the days elapsed.

    Days before the start resolve to the start's own slot.
    """
    days_since_start = (day - subscription_start).days
    return ((weekday_index(subscription_start) + max(days_since_start, 0)) % 7 + 7) % 7


def nutrition_for_slot(nutrition: NutritionPlan, slot: int) -> Optional[DailyNutritionPlan]:
    """Weekly-plan entry for the slot, else the plan for its day type."""
    direct = next((d for d in nutrition.weekly_plan if d.day_index == slot), None)
    if direct is not None:
        return direct
    if slot >= len(nutrition.rotation):
        return None
    return nutrition.plan_by_day_type.get(nutrition.rotation[slot])


def workout_for_slot(
    training: TrainingPlan,
    slot: int,
    completed_ids: List[str],
) -> Optional[CalendarWorkoutSummary]:
    session_id = training.session_id_for_day(slot)
    if not session_id:
        return None
    session = training.session_lookup().get(session_id)
    if session is None:
        return None
    return CalendarWorkoutSummary(
        id=session.id,
        title=session.title,
        focus=session.focus,
        completed=session.id in completed_ids,
    )


def create_monthly_calendar(
    plan: GeneratedPlan,
    logs: Mapping[str, DailyLog],
    today: Optional[date] = None,
) -> CalendarData:
    """
    Build the calendar grid for ``plan``.

    Args:
        plan: The stored plan
        logs: Completion logs keyed by local ISO date; missing keys mean no activity
        today: Local "today"; defaults to the system date

    Returns:
        CalendarData with full Monday-Sunday weeks spanning the subscription
    """
    today = today or date.today()
    start = plan.subscription_start
    end = plan.subscription_end

    calendar_start = add_days(start, -weekday_index(start))
    calendar_end = add_days(end, 6 - weekday_index(end))

    weeks: List[List[CalendarDaySummary]] = []
    days_by_date: Dict[str, CalendarDaySummary] = {}
    current_week: List[CalendarDaySummary] = []

    cursor = calendar_start
    while cursor <= calendar_end:
        iso_date = to_local_iso_date(cursor)
        in_subscription = start <= cursor <= end
        is_future = cursor > today
        log = None if is_future else logs.get(iso_date)

        completed_workouts = list(log.workouts_completed) if log else []
        completed_meals = set(log.meals_completed) if log else set()
        completed_habits = set(log.habits_completed) if log else set()

        slot = rotation_index_for(cursor, start)
        day_type = None
        meals = []
        workout = None
        if in_subscription:
            nutrition = nutrition_for_slot(plan.nutrition, slot)
            if nutrition is not None:
                day_type = nutrition.day_type
                meals = nutrition.meals
            workout = workout_for_slot(plan.training, slot, completed_workouts)

        summary = CalendarDaySummary(
            date=iso_date,
            day_number=cursor.day,
            day_label=DAY_LABELS[weekday_index(cursor)],
            in_subscription=in_subscription,
            is_today=cursor == today,
            is_future=is_future,
            day_type=day_type,
            workout=workout,
            meals=[
                CompletionItem(id=m.id, title=m.title, completed=m.id in completed_meals)
                for m in meals
            ],
            habits=[
                CompletionItem(id=h.id, title=h.title, completed=h.id in completed_habits)
                for h in plan.habits.daily_habits
            ],
        )
        current_week.append(summary)
        days_by_date[iso_date] = summary

        if len(current_week) == 7:
            weeks.append(current_week)
            current_week = []
        cursor = add_days(cursor, 1)

    if current_week:
        weeks.append(current_week)

    logger.debug(
        f"Projected calendar {calendar_start} to {calendar_end}",
        extra={"extra_fields": {"plan_id": plan.id, "days": len(days_by_date), "weeks": len(weeks)}},
    )

    return CalendarData(
        start=to_local_iso_date(start),
        end=to_local_iso_date(end),
        weeks=weeks,
        days_by_date=days_by_date,
    )
