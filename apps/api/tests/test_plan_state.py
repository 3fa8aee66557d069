"""
Tests for the Plan State Service

Toggles, energy check-ins, profile history and legacy payload
normalization.
"""
from datetime import date, timedelta

import pytest

from services.plan_engine.constants import SubscriptionTier
from services.plan_engine.models import DailyLog
from services.plan_state import (
    CompletionKind,
    TrackerState,
    ensure_log,
    initial_state,
    normalize_plan,
    reset,
    set_daily_energy,
    set_plan,
    set_profile,
    toggle_habit_completion,
    toggle_log_item,
    toggle_meal_completion,
    toggle_workout_completion,
    visible_profile_history,
)
from tests.profile_factory import make_profile

DAY = "2025-03-05"


class TestDailyLogs:
    """Completion toggles and energy"""

    def test_ensure_log_creates_empty(self):
        log = ensure_log({}, DAY)

        assert log == DailyLog(date=DAY)
        assert log.energy is None

    def test_ensure_log_returns_existing(self):
        stored = DailyLog(date=DAY, meals_completed=["oats"])

        assert ensure_log({DAY: stored}, DAY) is stored

    def test_toggle_adds_then_removes(self):
        state = toggle_meal_completion(initial_state(), DAY, "oats")
        assert state.logs[DAY].meals_completed == ["oats"]

        state = toggle_meal_completion(state, DAY, "oats")
        assert state.logs[DAY].meals_completed == []

    def test_toggles_touch_their_own_list(self):
        state = toggle_workout_completion(initial_state(), DAY, "upper-1")
        state = toggle_habit_completion(state, DAY, "hydration")
        log = state.logs[DAY]

        assert log.workouts_completed == ["upper-1"]
        assert log.habits_completed == ["hydration"]
        assert log.meals_completed == []

    def test_toggle_keeps_order(self):
        log = DailyLog(date=DAY, habits_completed=["walk", "nsdr"])

        assert toggle_log_item(log, CompletionKind.HABIT, "protein").habits_completed == [
            "walk", "nsdr", "protein",
        ]
        assert toggle_log_item(log, "habit", "walk").habits_completed == ["nsdr"]

    def test_inputs_are_not_mutated(self):
        before = toggle_meal_completion(initial_state(), DAY, "oats")
        after = toggle_meal_completion(before, DAY, "bowl")

        assert before.logs[DAY].meals_completed == ["oats"]
        assert after.logs[DAY].meals_completed == ["oats", "bowl"]

    def test_other_days_untouched(self):
        state = toggle_meal_completion(initial_state(), DAY, "oats")
        state = toggle_meal_completion(state, "2025-03-06", "eggs")

        assert state.logs[DAY].meals_completed == ["oats"]
        assert state.logs["2025-03-06"].meals_completed == ["eggs"]

    def test_energy(self):
        state = set_daily_energy(initial_state(), DAY, 4)

        assert state.logs[DAY].energy == 4

    @pytest.mark.parametrize("level", [0, 6, -1])
    def test_energy_out_of_range(self, level):
        with pytest.raises(ValueError):
            set_daily_energy(initial_state(), DAY, level)


class TestProfileHistory:
    """Snapshots are appended, never replaced"""

    def test_two_edits_keep_both_snapshots(self, plan, fixed_now):
        state = set_plan(initial_state(), plan)
        first = make_profile(weight_kg=67)
        second = make_profile(weight_kg=66)

        state = set_profile(state, first, now=fixed_now + timedelta(days=1))
        state = set_profile(state, second, now=fixed_now + timedelta(days=2))

        history = state.plan.profile_history
        assert [s.profile.weight_kg for s in history] == [68, 67, 66]
        assert [s.captured_at for s in history] == sorted(s.captured_at for s in history)
        assert state.plan.profile_snapshot == history[-1]
        assert state.profile == second

    def test_profile_without_plan(self):
        state = set_profile(initial_state(), make_profile())

        assert state.plan is None
        assert state.profile == make_profile()

    def test_visible_history_is_a_window(self, plan, fixed_now):
        state = set_plan(initial_state(), plan)
        for offset in range(1, 8):
            state = set_profile(state, make_profile(weight_kg=68 - offset), now=fixed_now + timedelta(days=offset))

        visible = visible_profile_history(state.plan, limit=5)

        assert len(state.plan.profile_history) == 8
        assert visible == state.plan.profile_history[-5:]
        assert visible_profile_history(state.plan, limit=0) == []

    def test_reset(self, plan):
        state = TrackerState(profile=make_profile(), plan=plan, logs={DAY: DailyLog(date=DAY)})

        assert reset(state) == initial_state()


class TestNormalizePlan:
    """Completing stored payloads from older revisions"""

    def legacy_payload(self, plan):
        data = plan.to_dict()
        for key in ("subscription_start", "subscription_end", "subscription_tier",
                    "profile_snapshot", "profile_history"):
            data.pop(key)
        return data

    def test_complete_payload_is_kept(self, plan):
        normalized = normalize_plan(plan.to_dict())

        assert normalized.subscription_start == plan.subscription_start
        assert normalized.subscription_end == plan.subscription_end
        assert normalized.profile_history == plan.profile_history
        assert normalized.to_dict() == plan.to_dict()

    def test_window_from_created_at(self, plan):
        normalized = normalize_plan(self.legacy_payload(plan), make_profile())

        assert normalized.subscription_start == date(2025, 3, 5)
        assert normalized.subscription_end == date(2025, 4, 3)
        assert normalized.subscription_tier == SubscriptionTier.UNSELECTED

    def test_snapshot_rebuilt_from_profile(self, plan):
        profile = make_profile(weight_kg=70)

        normalized = normalize_plan(self.legacy_payload(plan), profile)

        assert normalized.profile_snapshot.profile == profile
        assert normalized.profile_snapshot.captured_at == plan.created_at
        assert normalized.profile_history == [normalized.profile_snapshot]

    def test_snapshot_from_last_history_entry(self, plan):
        data = self.legacy_payload(plan)
        data["profile_history"] = [plan.profile_snapshot.to_dict()]

        normalized = normalize_plan(data)

        assert normalized.profile_snapshot.profile == plan.profile_snapshot.profile
        assert len(normalized.profile_history) == 1

    def test_snapshot_appended_when_missing_from_history(self, plan):
        data = plan.to_dict()
        data["profile_snapshot"]["captured_at"] = "2025-03-06T08:00:00"

        normalized = normalize_plan(data)

        assert len(normalized.profile_history) == 2
        assert normalized.profile_history[-1].captured_at == "2025-03-06T08:00:00"

    def test_timestamps_and_plain_dates_are_accepted(self, plan):
        data = plan.to_dict()
        data["subscription_start"] = "2025-03-05T09:30:00Z"
        data["subscription_end"] = "2025-04-03"

        normalized = normalize_plan(data)

        assert normalized.subscription_end == date(2025, 4, 3)
        assert isinstance(normalized.subscription_start, date)

    def test_unrecoverable_profile(self, plan):
        with pytest.raises(ValueError):
            normalize_plan(self.legacy_payload(plan))
