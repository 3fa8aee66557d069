"""
Plan State Service

Pure state transitions for a member's tracker: profile, plan and daily
completion logs. Storage is the caller's concern; every function returns a
new state (or log) and leaves its inputs untouched.

Each transition emits an analytics-style log event (``event`` plus its
properties in ``extra_fields``).
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional
import logging

from services.plan_engine.constants import DEFAULT_SUBSCRIPTION_DAYS, SubscriptionTier
from services.plan_engine.dates import add_days, parse_local_date
from services.plan_engine.models import (
    DailyLog,
    GeneratedPlan,
    HabitPlan,
    NutritionPlan,
    ProfileSnapshot,
    TrainingPlan,
    UserProfile,
)

logger = logging.getLogger(__name__)

MIN_ENERGY_LEVEL = 1
MAX_ENERGY_LEVEL = 5
DEFAULT_HISTORY_DISPLAY_LIMIT = 5


class CompletionKind(str, Enum):
    """Which completion list of a DailyLog an item belongs to."""
    WORKOUT = "workout"
    MEAL = "meal"
    HABIT = "habit"


_COMPLETION_FIELDS = {
    CompletionKind.WORKOUT: "workouts_completed",
    CompletionKind.MEAL: "meals_completed",
    CompletionKind.HABIT: "habits_completed",
}


@dataclass(frozen=True)
class TrackerState:
    profile: Optional[UserProfile] = None
    plan: Optional[GeneratedPlan] = None
    logs: Dict[str, DailyLog] = field(default_factory=dict)


def _track(event: str, **properties: Any) -> None:
    logger.info(event, extra={"extra_fields": {"event": event, **properties}})


def initial_state() -> TrackerState:
    return TrackerState()


# =============================================================================
# DAILY LOGS
# =============================================================================

def ensure_log(logs: Mapping[str, DailyLog], date: str) -> DailyLog:
    """The stored log for ``date``, or an empty one."""
    existing = logs.get(date)
    if existing is not None:
        return existing
    return DailyLog(date=date)


def toggle_log_item(log: DailyLog, kind: CompletionKind, item_id: str) -> DailyLog:
    """Add ``item_id`` to the completion list if absent, remove it if present."""
    field_name = _COMPLETION_FIELDS[CompletionKind(kind)]
    current: List[str] = getattr(log, field_name)
    if item_id in current:
        updated = [i for i in current if i != item_id]
    else:
        updated = [*current, item_id]
    return replace(log, **{field_name: updated})


def set_log_energy(log: DailyLog, level: int) -> DailyLog:
    """
    Record the day's energy level.

    Raises:
        ValueError: if ``level`` is outside 1..5
    """
    if not MIN_ENERGY_LEVEL <= level <= MAX_ENERGY_LEVEL:
        raise ValueError(
            f"Energy level must be between {MIN_ENERGY_LEVEL} and {MAX_ENERGY_LEVEL}, got {level}"
        )
    return replace(log, energy=level)


def _upsert_log(state: TrackerState, log: DailyLog) -> TrackerState:
    return replace(state, logs={**state.logs, log.date: log})


def _toggle(state: TrackerState, kind: CompletionKind, date: str, item_id: str) -> TrackerState:
    before = ensure_log(state.logs, date)
    after = toggle_log_item(before, kind, item_id)
    completed = item_id in getattr(after, _COMPLETION_FIELDS[kind])
    _track(f"{kind.value}_toggle", date=date, item_id=item_id, completed=completed)
    return _upsert_log(state, after)


def toggle_workout_completion(state: TrackerState, date: str, workout_id: str) -> TrackerState:
    return _toggle(state, CompletionKind.WORKOUT, date, workout_id)


def toggle_meal_completion(state: TrackerState, date: str, meal_id: str) -> TrackerState:
    return _toggle(state, CompletionKind.MEAL, date, meal_id)


def toggle_habit_completion(state: TrackerState, date: str, habit_id: str) -> TrackerState:
    return _toggle(state, CompletionKind.HABIT, date, habit_id)


def set_daily_energy(state: TrackerState, date: str, level: int) -> TrackerState:
    log = set_log_energy(ensure_log(state.logs, date), level)
    _track("energy_logged", date=date, energy_level=level)
    return _upsert_log(state, log)


# =============================================================================
# PROFILE + PLAN
# =============================================================================

def append_profile_snapshot(
    plan: GeneratedPlan,
    profile: UserProfile,
    now: Optional[datetime] = None,
) -> GeneratedPlan:
    """
    Return a copy of ``plan`` whose snapshot is ``profile``.

    The new snapshot is appended to the history; earlier entries stay.
    """
    now = now or datetime.now().astimezone()
    snapshot = ProfileSnapshot(captured_at=now.isoformat(), profile=profile)
    return replace(
        plan,
        profile_snapshot=snapshot,
        profile_history=[*plan.profile_history, snapshot],
    )


def set_profile(
    state: TrackerState,
    profile: UserProfile,
    now: Optional[datetime] = None,
) -> TrackerState:
    plan = state.plan
    if plan is not None:
        plan = append_profile_snapshot(plan, profile, now)
    _track(
        "profile_saved",
        goal=profile.goal.value,
        days_per_week=profile.days_per_week,
        history_length=len(plan.profile_history) if plan else 0,
    )
    return replace(state, profile=profile, plan=plan)


def set_plan(state: TrackerState, plan: GeneratedPlan) -> TrackerState:
    _track(
        "plan_saved",
        plan_id=plan.id,
        subscription_tier=plan.subscription_tier.value,
        workouts_per_week=len(plan.training.training_days),
    )
    return replace(state, plan=plan)


def reset(state: TrackerState) -> TrackerState:
    _track("plan_reset", had_plan=state.plan is not None)
    return initial_state()


def visible_profile_history(
    plan: GeneratedPlan,
    limit: int = DEFAULT_HISTORY_DISPLAY_LIMIT,
) -> List[ProfileSnapshot]:
    """Last ``limit`` snapshots for display. The plan keeps all of them."""
    if limit <= 0:
        return []
    return list(plan.profile_history[-limit:])


# =============================================================================
# STORED PAYLOADS
# =============================================================================

def normalize_plan(
    payload: Dict[str, Any],
    profile: Optional[UserProfile] = None,
) -> GeneratedPlan:
    """
    Complete a stored plan payload that may predate later fields.

    Fills in:
    - subscription_start from created_at
    - subscription_end as start + 29 days
    - subscription_tier as "unselected"
    - profile_snapshot from ``profile``, else the last history entry
    - profile_history, seeded and merged with the snapshot

    A payload with neither snapshot nor history has lost its onboarding
    profile. Both are then rebuilt from ``profile`` stamped with
    ``created_at``, so after a profile edit the seeded entry shows the edited
    profile, not the one the plan was generated from. The mobile app's
    migration did the same; nothing better can be recovered from the payload.

    Raises:
        ValueError: if no profile can be recovered for the snapshot
    """
    created_at = payload["created_at"]
    start = parse_local_date(payload.get("subscription_start") or created_at)
    stored_end = payload.get("subscription_end")
    end = parse_local_date(stored_end) if stored_end else add_days(start, DEFAULT_SUBSCRIPTION_DAYS - 1)
    tier = SubscriptionTier(payload.get("subscription_tier") or SubscriptionTier.UNSELECTED)

    history = [ProfileSnapshot.from_dict(s) for s in payload.get("profile_history") or []]
    stored_snapshot = payload.get("profile_snapshot")
    snapshot = ProfileSnapshot.from_dict(stored_snapshot) if stored_snapshot else None

    fallback_profile = profile
    if fallback_profile is None and snapshot is not None:
        fallback_profile = snapshot.profile
    if fallback_profile is None and history:
        fallback_profile = history[-1].profile

    if snapshot is None:
        if fallback_profile is None:
            raise ValueError("Plan payload has no profile snapshot and no profile to rebuild it from")
        snapshot = ProfileSnapshot(captured_at=created_at, profile=fallback_profile)

    if not history and fallback_profile is not None:
        history = [ProfileSnapshot(captured_at=created_at, profile=fallback_profile)]
    if not any(item.captured_at == snapshot.captured_at for item in history):
        history.append(snapshot)

    if not (payload.get("subscription_start") and stored_end and payload.get("profile_history")):
        logger.info(
            "Normalized legacy plan payload",
            extra={"extra_fields": {"plan_id": payload.get("id"), "history_length": len(history)}},
        )

    return GeneratedPlan(
        id=payload["id"],
        created_at=created_at,
        subscription_start=start,
        subscription_end=end,
        subscription_tier=tier,
        profile_snapshot=snapshot,
        profile_history=history,
        training=TrainingPlan.from_dict(payload["training"]),
        nutrition=NutritionPlan.from_dict(payload["nutrition"]),
        habits=HabitPlan.from_dict(payload["habits"]),
    )
