"""
Tests for the Training Plan Builder

Split selection, weekday placement, exercise selection and the profile
filters on tagged exercises.
"""
import pytest

from services.plan_engine.constants import (
    ActivityLevel,
    EquipmentLocation,
    ExerciseIntensity,
    Focus,
    Goal,
    HealthCondition,
    SessionDifficulty,
)
from services.plan_engine.models import Equipment, WorkoutExercise
from services.plan_engine.training_builder import (
    FULL_BODY_NOTE,
    DEFAULT_NOTE,
    TrainingPlanBuilder,
    UnsupportedSplitError,
    build_training_plan,
    exercise_matches_profile,
)
from tests.profile_factory import make_profile


def exercise(id, focus, **tags):
    return WorkoutExercise(
        id=id,
        name=id.replace("-", " ").title(),
        equipment="bodyweight",
        focus=focus,
        instructions="Controlled reps.",
        sets=3,
        rep_range="10-12",
        **tags,
    )


class TestSplitSchedule:
    """Sessions land on fixed weekdays per split"""

    def test_three_days_on_monday_wednesday_friday(self):
        """3 days -> sessions on weekday indices 0, 2, 4"""
        training = build_training_plan(make_profile(days_per_week=3))

        assert training.split == "Upper / Lower / Full"
        assert training.training_days == [0, 2, 4]
        rest_days = [e.day for e in training.schedule if e.session_id is None]
        assert rest_days == [1, 3, 5, 6]

    def test_two_days_on_tuesday_friday(self):
        training = build_training_plan(make_profile(days_per_week=2))

        assert training.split == "Full Body A/B"
        assert training.training_days == [1, 4]

    def test_four_and_five_days(self):
        assert build_training_plan(make_profile(days_per_week=4)).training_days == [0, 1, 3, 4]
        assert build_training_plan(make_profile(days_per_week=5)).training_days == [0, 1, 2, 3, 4]

    def test_schedule_has_seven_slots_in_order(self):
        training = build_training_plan(make_profile(days_per_week=4))

        assert [e.day for e in training.schedule] == list(range(7))

    @pytest.mark.parametrize("days", [0, 1, 6, 7])
    def test_unsupported_days_fail_fast(self, days):
        """Anything outside 2-5 is a contract violation"""
        with pytest.raises(UnsupportedSplitError) as exc_info:
            build_training_plan(make_profile(days_per_week=days))

        assert exc_info.value.days_per_week == days
        assert isinstance(exc_info.value, ValueError)


class TestSessions:
    """Session identity and metadata"""

    def test_session_ids_follow_split_order(self):
        training = build_training_plan(make_profile(days_per_week=3))

        assert [s.id for s in training.sessions] == ["upper-1", "lower-2", "full-3"]
        assert [s.title for s in training.sessions] == ["Upper 1", "Lower 2", "Full 3"]

    def test_every_scheduled_session_exists(self):
        """Schedule never references a missing session"""
        for days in (2, 3, 4, 5):
            training = build_training_plan(make_profile(days_per_week=days))
            lookup = training.session_lookup()
            for entry in training.schedule:
                if entry.session_id is not None:
                    assert entry.session_id in lookup

    def test_difficulty_follows_activity(self):
        sedentary = build_training_plan(make_profile(activity_level=ActivityLevel.SEDENTARY))
        active = build_training_plan(make_profile(activity_level=ActivityLevel.MODERATE))

        assert {s.difficulty for s in sedentary.sessions} == {SessionDifficulty.BEGINNER}
        assert {s.difficulty for s in active.sessions} == {SessionDifficulty.INTERMEDIATE}

    def test_notes_by_focus(self):
        training = build_training_plan(make_profile(days_per_week=3))
        notes = {s.focus: s.notes for s in training.sessions}

        assert notes[Focus.FULL] == FULL_BODY_NOTE
        assert notes[Focus.UPPER] == DEFAULT_NOTE

    def test_sessions_never_exceed_six_exercises(self):
        for location in (EquipmentLocation.HOME, EquipmentLocation.GYM):
            for days in (2, 3, 4, 5):
                profile = make_profile(days_per_week=days, equipment=Equipment(location=location))
                for session in build_training_plan(profile).sessions:
                    assert 0 < len(session.exercises) <= 6
                    assert session.duration_minutes == 45

    def test_no_duplicate_exercises_within_session(self):
        for session in build_training_plan(make_profile(days_per_week=5)).sessions:
            ids = [e.id for e in session.exercises]
            assert len(ids) == len(set(ids))


class TestExerciseSelection:
    """pick_exercises against small injected catalogs"""

    def test_five_primary_then_complementary(self):
        """Full pools give 5 focus exercises and 1 core/mobility"""
        home = [exercise(f"squat-{i}", Focus.LOWER) for i in range(7)]
        home += [exercise("plank", Focus.CORE), exercise("hip-opener", Focus.MOBILITY)]
        builder = TrainingPlanBuilder(home_exercises=home, gym_exercises=[])

        picked = builder.pick_exercises(Focus.LOWER, make_profile())

        assert [e.id for e in picked] == [
            "squat-0", "squat-1", "squat-2", "squat-3", "squat-4", "plank",
        ]

    def test_tops_up_from_primary_without_complementary(self):
        """Six matching exercises always fill the session"""
        home = [exercise(f"row-{i}", Focus.PULL) for i in range(6)]
        builder = TrainingPlanBuilder(home_exercises=home, gym_exercises=[])

        picked = builder.pick_exercises(Focus.UPPER, make_profile())

        assert len(picked) == 6

    def test_short_pool_gives_short_session(self):
        home = [exercise("push-up", Focus.PUSH), exercise("dead-bug", Focus.CORE)]
        builder = TrainingPlanBuilder(home_exercises=home, gym_exercises=[])

        picked = builder.pick_exercises(Focus.UPPER, make_profile())

        assert [e.id for e in picked] == ["push-up", "dead-bug"]

    def test_focus_compatibility(self):
        """Full sessions accept upper and lower; lower sessions accept only lower"""
        home = [
            exercise("press", Focus.UPPER),
            exercise("lunge", Focus.LOWER),
            exercise("burpee", Focus.FULL),
            exercise("bike", Focus.CARDIO),
        ]
        builder = TrainingPlanBuilder(home_exercises=home, gym_exercises=[])

        full = builder.pick_exercises(Focus.FULL, make_profile())
        lower = builder.pick_exercises(Focus.LOWER, make_profile())

        assert [e.id for e in full] == ["press", "lunge", "burpee"]
        assert [e.id for e in lower] == ["lunge"]

    def test_falls_back_to_untailored_pool(self):
        """If no tailored exercise matches the focus, the whole location pool is used"""
        home = [exercise("box-jump", Focus.LOWER, intensity=ExerciseIntensity.ADVANCED)]
        builder = TrainingPlanBuilder(home_exercises=home, gym_exercises=[])

        picked = builder.pick_exercises(Focus.LOWER, make_profile())

        assert [e.id for e in picked] == ["box-jump"]

    def test_uses_gym_pool_for_gym_profiles(self):
        gym = [exercise("leg-press", Focus.LOWER)]
        home = [exercise("wall-sit", Focus.LOWER)]
        builder = TrainingPlanBuilder(home_exercises=home, gym_exercises=gym)
        profile = make_profile(equipment=Equipment(location=EquipmentLocation.GYM))

        assert [e.id for e in builder.pick_exercises(Focus.LOWER, profile)] == ["leg-press"]


class TestExerciseMatchesProfile:
    """Applicability tags on exercises"""

    def test_untagged_matches(self):
        assert exercise_matches_profile(exercise("plain", Focus.UPPER), make_profile())

    def test_preferred_location(self):
        gym_only = exercise("cable", Focus.UPPER, preferred_location=EquipmentLocation.GYM)

        assert not exercise_matches_profile(gym_only, make_profile())

    def test_goal_tags(self):
        gain_only = exercise("heavy", Focus.LOWER, goal_tags=(Goal.GAIN,))

        assert not exercise_matches_profile(gain_only, make_profile(goal=Goal.LOSE))
        assert exercise_matches_profile(gain_only, make_profile(goal=Goal.GAIN))

    def test_health_tags_need_a_shared_condition(self):
        tagged = exercise("walk", Focus.CARDIO, health_tags=(HealthCondition.IR,))

        assert not exercise_matches_profile(tagged, make_profile())
        assert exercise_matches_profile(
            tagged, make_profile(health_conditions=(HealthCondition.IR, HealthCondition.PCOS))
        )

    def test_intensity_by_activity(self):
        advanced = exercise("pistol", Focus.LOWER, intensity=ExerciseIntensity.ADVANCED)
        intermediate = exercise("split-squat", Focus.LOWER, intensity=ExerciseIntensity.INTERMEDIATE)

        assert not exercise_matches_profile(advanced, make_profile(activity_level=ActivityLevel.MODERATE))
        assert exercise_matches_profile(advanced, make_profile(activity_level=ActivityLevel.HIGH))
        assert not exercise_matches_profile(
            intermediate, make_profile(activity_level=ActivityLevel.SEDENTARY)
        )
        assert exercise_matches_profile(intermediate, make_profile(activity_level=ActivityLevel.LIGHT))
