"""
Plan Generator

Main orchestrator for plan generation.
Coordinates the training, nutrition and habit builders into one plan.

Usage:
    generator = PlanGenerator()

    # First plan for a new member
    plan = generator.generate(profile)

    # Regenerate after a profile edit; window, tier and history carry over
    plan = generator.generate(new_profile, previous_plan=plan)
"""

import logging
from datetime import date, datetime
from typing import List, Optional, Sequence

from .constants import DEFAULT_SUBSCRIPTION_DAYS, HIGH_DAYS_PER_WEEK, DayIntensity, SubscriptionTier
from .dates import add_days, local_today
from .habit_builder import build_habit_plan
from .models import GeneratedPlan, ProfileSnapshot, ScheduleEntry, UserProfile
from .nutrition_builder import NutritionPlanBuilder, calculate_target_calories
from .training_builder import TrainingPlanBuilder

logger = logging.getLogger(__name__)


def create_rotation(schedule: Sequence[ScheduleEntry]) -> List[DayIntensity]:
    """
    Day intensity for each weekday slot.

    The first two training days (in weekday order) are high, later training
    days are mid, rest days are low.
    """
    rotation = [DayIntensity.LOW] * 7
    training_days = sorted(entry.day for entry in schedule if entry.session_id)
    for position, day in enumerate(training_days):
        rotation[day] = DayIntensity.HIGH if position < HIGH_DAYS_PER_WEEK else DayIntensity.MID
    return rotation


def _snapshot_timestamp(now: datetime) -> str:
    return now.isoformat()


def _plan_id(now: datetime) -> str:
    return f"plan-{int(now.timestamp() * 1000)}"


class PlanGenerator:
    """
    Generates a complete plan from a profile.

    Pure apart from reading the clock when ``now`` is not given; identical
    inputs and ``now`` give identical plans.
    """

    def __init__(
        self,
        training_builder: Optional[TrainingPlanBuilder] = None,
        nutrition_builder: Optional[NutritionPlanBuilder] = None,
        subscription_days: int = DEFAULT_SUBSCRIPTION_DAYS,
    ):
        self.training_builder = training_builder or TrainingPlanBuilder()
        self.nutrition_builder = nutrition_builder or NutritionPlanBuilder()
        self.subscription_days = subscription_days

    def generate(
        self,
        profile: UserProfile,
        previous_plan: Optional[GeneratedPlan] = None,
        now: Optional[datetime] = None,
        reset_subscription: bool = False,
        today: Optional[date] = None,
    ) -> GeneratedPlan:
        """
        Build training, nutrition and habits for ``profile``.

        A new subscription window opens on ``today`` (the member's local date)
        when given, else on the calendar day of ``now`` in its own offset.

        Raises:
            UnsupportedSplitError: if ``profile.days_per_week`` has no split
        """
        now = now or datetime.now().astimezone()

        target_calories = calculate_target_calories(profile)
        training = self.training_builder.build(profile)
        rotation = create_rotation(training.schedule)
        nutrition = self.nutrition_builder.build(profile, target_calories, rotation)
        habits = build_habit_plan(profile)

        if previous_plan is not None and not reset_subscription:
            start = previous_plan.subscription_start
            end = previous_plan.subscription_end
        else:
            start = today or local_today(now)
            end = add_days(start, self.subscription_days - 1)

        snapshot = ProfileSnapshot(captured_at=_snapshot_timestamp(now), profile=profile)
        history: List[ProfileSnapshot] = []
        if previous_plan is not None:
            history = list(previous_plan.profile_history) or [previous_plan.profile_snapshot]
        history.append(snapshot)

        tier = previous_plan.subscription_tier if previous_plan is not None else SubscriptionTier.UNSELECTED

        plan = GeneratedPlan(
            id=_plan_id(now),
            created_at=now.isoformat(),
            subscription_start=start,
            subscription_end=end,
            subscription_tier=tier,
            profile_snapshot=snapshot,
            profile_history=history,
            training=training,
            nutrition=nutrition,
            habits=habits,
        )

        logger.info(
            f"Generated plan {plan.id}: {training.split}, {target_calories} kcal mid-tier",
            extra={"extra_fields": {
                "plan_id": plan.id,
                "split": training.split,
                "target_calories": target_calories,
                "rotation": [d.value for d in rotation],
                "regenerated": previous_plan is not None,
                "history_length": len(history),
            }},
        )
        return plan


def generate_plan(
    profile: UserProfile,
    previous_plan: Optional[GeneratedPlan] = None,
    now: Optional[datetime] = None,
    subscription_days: int = DEFAULT_SUBSCRIPTION_DAYS,
    reset_subscription: bool = False,
    today: Optional[date] = None,
) -> GeneratedPlan:
    """Convenience wrapper around ``PlanGenerator().generate``."""
    generator = PlanGenerator(subscription_days=subscription_days)
    return generator.generate(
        profile,
        previous_plan=previous_plan,
        now=now,
        reset_subscription=reset_subscription,
        today=today,
    )
