"""
Tests for the Monthly Calendar Service

Grid shape, rotation anchoring, subscription bounds and future-day log
isolation.
"""
from dataclasses import replace
from datetime import date, timedelta

from services.monthly_calendar import create_monthly_calendar, nutrition_for_slot, rotation_index_for
from services.plan_engine import generate_plan
from services.plan_engine.constants import DayIntensity
from services.plan_engine.models import DailyLog
from tests.profile_factory import FIXED_NOW, make_profile

TODAY = date(2025, 3, 10)  # Monday of the subscription's second week


class TestGridShape:
    """Monday-start weeks covering the window"""

    def test_range_expands_to_full_weeks(self, plan):
        calendar = create_monthly_calendar(plan, {}, today=TODAY)

        # Window 2025-03-05 (Wed) .. 2025-04-03 (Thu) -> 2025-03-03 .. 2025-04-06
        assert calendar.start == "2025-03-05"
        assert calendar.end == "2025-04-03"
        assert calendar.weeks[0][0].date == "2025-03-03"
        assert calendar.weeks[-1][-1].date == "2025-04-06"
        assert len(calendar.weeks) == 5
        assert all(len(week) == 7 for week in calendar.weeks)
        assert len(calendar.days_by_date) == 35

    def test_rows_start_on_monday(self, plan):
        calendar = create_monthly_calendar(plan, {}, today=TODAY)

        for week in calendar.weeks:
            assert [d.day_label for d in week] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

    def test_days_by_date_matches_weeks(self, plan):
        calendar = create_monthly_calendar(plan, {}, today=TODAY)

        for week in calendar.weeks:
            for day in week:
                assert calendar.days_by_date[day.date] is day

    def test_day_numbers(self, plan):
        calendar = create_monthly_calendar(plan, {}, today=TODAY)

        assert calendar.days_by_date["2025-03-31"].day_number == 31
        assert calendar.days_by_date["2025-04-01"].day_number == 1


class TestSubscriptionBounds:
    """Days outside the window"""

    def test_flags(self, plan):
        days = create_monthly_calendar(plan, {}, today=TODAY).days_by_date

        assert not days["2025-03-04"].in_subscription
        assert days["2025-03-05"].in_subscription
        assert days["2025-04-03"].in_subscription
        assert not days["2025-04-04"].in_subscription

    def test_outside_days_have_no_plan_content(self, plan):
        day = create_monthly_calendar(plan, {}, today=TODAY).days_by_date["2025-03-03"]

        assert day.day_type is None
        assert day.workout is None
        assert day.meals == []

    def test_habits_always_listed(self, plan):
        calendar = create_monthly_calendar(plan, {}, today=TODAY)
        habit_ids = [h.id for h in plan.habits.daily_habits]

        for day in calendar.days_by_date.values():
            assert [h.id for h in day.habits] == habit_ids


class TestRotationAnchoring:
    """Rotation cycles from the subscription start"""

    def test_slot_formula(self):
        start = date(2025, 3, 5)  # Wednesday

        assert rotation_index_for(start, start) == 2
        assert rotation_index_for(start + timedelta(days=5), start) == 0
        assert rotation_index_for(start + timedelta(days=21), start) == 2
        # Days before the start resolve to the start's slot
        assert rotation_index_for(start - timedelta(days=2), start) == 2

    def test_same_weekday_three_weeks_later_matches_start(self, plan):
        days = create_monthly_calendar(plan, {}, today=TODAY).days_by_date
        start, later = days["2025-03-05"], days["2025-03-26"]

        assert later.day_type == start.day_type == DayIntensity.HIGH
        assert later.workout.id == start.workout.id == "lower-2"
        assert [m.id for m in later.meals] == [m.id for m in start.meals]

    def test_day_types_follow_rotation(self, plan):
        calendar = create_monthly_calendar(plan, {}, today=TODAY)
        start = plan.subscription_start

        for iso, day in calendar.days_by_date.items():
            if not day.in_subscription:
                continue
            slot = rotation_index_for(date.fromisoformat(iso), start)
            assert day.day_type == plan.nutrition.rotation[slot]

    def test_workouts_on_training_days_only(self, plan):
        days = create_monthly_calendar(plan, {}, today=TODAY).days_by_date

        assert days["2025-03-10"].workout.id == "upper-1"
        assert days["2025-03-11"].workout is None
        assert days["2025-03-14"].workout.id == "full-3"
        assert days["2025-03-15"].workout is None

    def test_falls_back_to_plan_by_day_type(self, plan):
        """Without weekly entries the rotation picks the day-type plan"""
        nutrition = replace(plan.nutrition, weekly_plan=[])

        chosen = nutrition_for_slot(nutrition, 1)

        assert chosen is nutrition.plan_by_day_type[DayIntensity.LOW]

    def test_start_on_monday(self):
        monday_plan = generate_plan(make_profile(), now=FIXED_NOW - timedelta(days=2))
        days = create_monthly_calendar(monday_plan, {}, today=TODAY).days_by_date

        assert monday_plan.subscription_start == date(2025, 3, 3)
        assert days["2025-03-03"].workout.id == "upper-1"


class TestCompletionLogs:
    """Logs mark items complete; future days ignore them"""

    def test_past_log_marks_items(self, plan):
        start = create_monthly_calendar(plan, {}, today=TODAY).days_by_date["2025-03-05"]
        meal_id = start.meals[0].id
        habit_id = start.habits[0].id
        logs = {
            "2025-03-05": DailyLog(
                date="2025-03-05",
                workouts_completed=["lower-2"],
                meals_completed=[meal_id],
                habits_completed=[habit_id],
            )
        }

        day = create_monthly_calendar(plan, logs, today=TODAY).days_by_date["2025-03-05"]

        assert day.workout.completed
        assert day.meals[0].completed
        assert not any(m.completed for m in day.meals[1:])
        assert day.habits[0].completed

    def test_future_logs_are_ignored(self, plan):
        future = create_monthly_calendar(plan, {}, today=TODAY).days_by_date["2025-03-12"]
        logs = {
            "2025-03-12": DailyLog(
                date="2025-03-12",
                workouts_completed=[future.workout.id],
                meals_completed=[m.id for m in future.meals],
                habits_completed=[h.id for h in future.habits],
            )
        }

        day = create_monthly_calendar(plan, logs, today=TODAY).days_by_date["2025-03-12"]

        assert day.is_future
        assert not day.workout.completed
        assert not any(m.completed for m in day.meals)
        assert not any(h.completed for h in day.habits)

    def test_today_reads_its_log(self, plan):
        logs = {"2025-03-10": DailyLog(date="2025-03-10", workouts_completed=["upper-1"])}

        day = create_monthly_calendar(plan, logs, today=TODAY).days_by_date["2025-03-10"]

        assert day.is_today
        assert not day.is_future
        assert day.workout.completed

    def test_missing_log_means_nothing_done(self, plan):
        day = create_monthly_calendar(plan, {}, today=TODAY).days_by_date["2025-03-06"]

        assert not any(m.completed for m in day.meals)
        assert not any(h.completed for h in day.habits)

    def test_only_today_is_flagged(self, plan):
        calendar = create_monthly_calendar(plan, {}, today=TODAY)

        assert [d for d, s in calendar.days_by_date.items() if s.is_today] == ["2025-03-10"]
