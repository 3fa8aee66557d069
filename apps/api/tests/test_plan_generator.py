"""
Tests for the Plan Generator

Rotation, subscription window, tier carry-over, profile history and
determinism.
"""
from dataclasses import replace
import time
from datetime import date, datetime, timedelta, timezone

import pytest

from services.plan_engine import PlanGenerator, UnsupportedSplitError, create_rotation, generate_plan
from services.plan_engine.constants import DayIntensity, SubscriptionTier
from services.plan_engine.dates import parse_local_date, to_local_iso_date
from services.plan_engine.models import ScheduleEntry
from tests.profile_factory import make_profile

LOW, MID, HIGH = DayIntensity.LOW, DayIntensity.MID, DayIntensity.HIGH


def schedule_for(days):
    return [ScheduleEntry(day=d, session_id=f"s-{d}" if d in days else None) for d in range(7)]


class TestRotation:
    """Training days drive the intensity rotation"""

    def test_three_day_rotation(self):
        """Mon/Wed high, Fri mid, everything else low"""
        assert create_rotation(schedule_for({0, 2, 4})) == [HIGH, LOW, HIGH, LOW, MID, LOW, LOW]

    def test_two_day_rotation(self):
        assert create_rotation(schedule_for({1, 4})) == [LOW, HIGH, LOW, LOW, HIGH, LOW, LOW]

    def test_five_day_rotation(self):
        assert create_rotation(schedule_for({0, 1, 2, 3, 4})) == [HIGH, HIGH, MID, MID, MID, LOW, LOW]

    def test_rest_week(self):
        assert create_rotation(schedule_for(set())) == [LOW] * 7

    def test_plan_rotation_matches_schedule(self, plan):
        assert plan.nutrition.rotation == [HIGH, LOW, HIGH, LOW, MID, LOW, LOW]
        for day in plan.training.training_days:
            assert plan.nutrition.rotation[day] != LOW


class TestFirstGeneration:
    """A brand-new plan"""

    def test_subscription_window(self, plan):
        """30 days inclusive from today"""
        assert plan.subscription_start == date(2025, 3, 5)
        assert plan.subscription_end == date(2025, 4, 3)
        assert (plan.subscription_end - plan.subscription_start).days == 29

    def test_defaults(self, plan, profile, fixed_now):
        assert plan.subscription_tier == SubscriptionTier.UNSELECTED
        assert plan.profile_snapshot.profile == profile
        assert plan.profile_history == [plan.profile_snapshot]
        assert plan.created_at == fixed_now.isoformat()

    def test_id_is_timestamp_derived(self, plan, fixed_now):
        assert plan.id == f"plan-{int(fixed_now.timestamp() * 1000)}"

    def test_custom_window_length(self, profile, fixed_now):
        plan = generate_plan(profile, now=fixed_now, subscription_days=7)

        assert plan.subscription_end == date(2025, 3, 11)

    def test_unsupported_days_per_week(self, fixed_now):
        with pytest.raises(UnsupportedSplitError):
            generate_plan(make_profile(days_per_week=6), now=fixed_now)


class TestRegeneration:
    """Regenerating from a previous plan"""

    def test_tier_carries_over(self, plan, fixed_now):
        chosen = replace(plan, subscription_tier=SubscriptionTier.FULL)

        regenerated = generate_plan(make_profile(weight_kg=66), chosen, now=fixed_now + timedelta(days=3))

        assert regenerated.subscription_tier == SubscriptionTier.FULL

    def test_window_is_preserved(self, plan, fixed_now):
        later = fixed_now + timedelta(days=10)

        regenerated = generate_plan(make_profile(weight_kg=66), plan, now=later)

        assert regenerated.subscription_start == plan.subscription_start

    def test_stored_timestamps_resolve_in_their_own_offset(self, host_timezone):
        host_timezone("Asia/Tokyo")

        assert parse_local_date("2025-03-05T23:30:00-05:00") == date(2025, 3, 5)
        assert parse_local_date("2025-03-05T23:30:00Z") == date(2025, 3, 5)
        assert to_local_iso_date(TOKYO_MORNING) == "2025-03-06"
        assert regenerated.subscription_end == plan.subscription_end

    def test_window_reset_on_request(self, plan, fixed_now):
        later = fixed_now + timedelta(days=10)

        regenerated = generate_plan(make_profile(weight_kg=66), plan, now=later, reset_subscription=True)

        assert regenerated.subscription_start == date(2025, 3, 15)
        assert regenerated.subscription_end == date(2025, 4, 13)

    def test_history_is_appended(self, plan, fixed_now):
        later = fixed_now + timedelta(days=1)
        new_profile = make_profile(weight_kg=66)

        regenerated = generate_plan(new_profile, plan, now=later)

        assert len(regenerated.profile_history) == 2
        assert regenerated.profile_history[0] == plan.profile_snapshot
        assert regenerated.profile_history[1].profile == new_profile
        assert regenerated.profile_snapshot == regenerated.profile_history[-1]

    def test_previous_plan_is_not_mutated(self, plan, fixed_now):
        generate_plan(make_profile(weight_kg=66), plan, now=fixed_now + timedelta(days=1))

        assert len(plan.profile_history) == 1

    def test_history_seeded_from_snapshot_when_empty(self, plan, fixed_now):
        legacy = replace(plan, profile_history=[])

        regenerated = generate_plan(make_profile(), legacy, now=fixed_now + timedelta(days=1))

        assert regenerated.profile_history[0] == plan.profile_snapshot
        assert len(regenerated.profile_history) == 2


class TestDeterminism:
    """Same inputs, same plan"""

    def test_identical_output_for_identical_inputs(self, profile, fixed_now):
        first = generate_plan(profile, now=fixed_now)
        second = generate_plan(profile, now=fixed_now)

        assert first.to_dict() == second.to_dict()

    def test_only_id_and_timestamps_change_with_the_clock(self, profile, fixed_now):
        first = generate_plan(profile, now=fixed_now).to_dict()
        second = generate_plan(profile, now=fixed_now + timedelta(seconds=5)).to_dict()

        for key in ("training", "nutrition", "habits", "subscription_start", "subscription_end"):
            assert first[key] == second[key]
        assert first["id"] != second["id"]

    def test_generator_instance_reuse(self, profile, fixed_now):
        generator = PlanGenerator()

        assert generator.generate(profile, now=fixed_now).to_dict() == generator.generate(
            profile, now=fixed_now
        ).to_dict()


TOKYO_MORNING = datetime(2025, 3, 6, 1, 0, tzinfo=timezone(timedelta(hours=9)))


@pytest.fixture
def host_timezone(monkeypatch):
    """Switch the process timezone for one test"""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is unavailable on this platform")

    def switch(name):
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield switch
    monkeypatch.undo()
    time.tzset()


class TestMemberLocalDay:
    """The window opens on the member's day, wherever the API runs"""

    @pytest.mark.parametrize("host", ["UTC", "Asia/Tokyo", "America/Los_Angeles"])
    def test_aware_now_keeps_its_own_offset(self, profile, host_timezone, host):
        """01:00 in Tokyo is still the 6th, even on a UTC host"""
        host_timezone(host)

        plan = generate_plan(profile, now=TOKYO_MORNING)

        assert plan.subscription_start == date(2025, 3, 6)
        assert plan.subscription_end == date(2025, 4, 4)

    def test_same_plan_on_every_host(self, profile, host_timezone):
        host_timezone("UTC")
        utc = generate_plan(profile, now=TOKYO_MORNING).to_dict()
        host_timezone("Asia/Tokyo")
        tokyo = generate_plan(profile, now=TOKYO_MORNING).to_dict()

        assert utc == tokyo

    def test_explicit_today_wins(self, profile, fixed_now):
        plan = generate_plan(profile, now=fixed_now, today=date(2025, 3, 10))

        assert plan.subscription_start == date(2025, 3, 10)
        assert plan.subscription_end == date(2025, 4, 8)

    def test_today_ignored_when_window_is_kept(self, plan, fixed_now):
        regenerated = generate_plan(
            plan.profile_snapshot.profile, previous_plan=plan, now=fixed_now, today=date(2025, 3, 20)
        )

        assert regenerated.subscription_start == plan.subscription_start


class TestSerialization:
    """to_dict output is JSON-ready"""

    def test_enums_and_dates_are_plain_values(self, plan):
        data = plan.to_dict()

        assert data["subscription_start"] == "2025-03-05"
        assert data["subscription_tier"] == "unselected"
        assert data["nutrition"]["rotation"][0] == "high"
        assert set(data["nutrition"]["plan_by_day_type"]) == {"low", "mid", "high"}
        assert data["training"]["schedule"][1] == {"day": 1, "session_id": None}
