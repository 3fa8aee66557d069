"""
Training Plan Builder

Picks the weekly split for the profile's training days and fills every
session with catalog exercises that fit the profile.

Usage:
    builder = TrainingPlanBuilder()
    training = builder.build(profile)

Selection is deterministic: pools are walked in catalog order, nothing is
shuffled, so the same profile always gets the same sessions.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Set

from .catalog import GYM_EXERCISES, HOME_EXERCISES
from .constants import (
    COMPLEMENTARY_FOCUSES,
    EXERCISES_PER_SESSION,
    FOCUS_COMPATIBILITY,
    SESSION_DURATION_MINUTES,
    SESSION_WEEKDAYS,
    SPLITS,
    SUPPORTED_DAYS_PER_WEEK,
    ActivityLevel,
    EquipmentLocation,
    ExerciseIntensity,
    Focus,
    SessionDifficulty,
)
from .models import ScheduleEntry, TrainingPlan, UserProfile, WorkoutExercise, WorkoutSession
from .selection import first_acceptable

logger = logging.getLogger(__name__)


FULL_BODY_NOTE = (
    "Increase the load once you hit the top of the rep range two weeks in a row."
)
DEFAULT_NOTE = "Focus on technique and breathing, control the 2-1-1 tempo."


class UnsupportedSplitError(ValueError):
    """days_per_week has no split. Input validation should have caught it."""

    def __init__(self, days_per_week: int):
        super().__init__(
            f"Unsupported days_per_week={days_per_week}; "
            f"expected one of {sorted(SUPPORTED_DAYS_PER_WEEK)}"
        )
        self.days_per_week = days_per_week


def exercise_matches_profile(exercise: WorkoutExercise, profile: UserProfile) -> bool:
    """True if every applicability tag on the exercise accepts the profile."""
    if exercise.preferred_location and exercise.preferred_location != profile.equipment.location:
        return False
    if exercise.goal_tags and profile.goal not in exercise.goal_tags:
        return False
    if exercise.health_tags and not any(
        condition in exercise.health_tags for condition in profile.health_conditions
    ):
        return False
    if exercise.intensity == ExerciseIntensity.ADVANCED and profile.activity_level != ActivityLevel.HIGH:
        return False
    if (
        exercise.intensity == ExerciseIntensity.INTERMEDIATE
        and profile.activity_level == ActivityLevel.SEDENTARY
    ):
        return False
    return True


class TrainingPlanBuilder:
    """
    Build the weekly training plan for a profile.

    Home and gym pools can be swapped out (tests use tiny catalogs).
    """

    def __init__(
        self,
        home_exercises: Optional[Sequence[WorkoutExercise]] = None,
        gym_exercises: Optional[Sequence[WorkoutExercise]] = None,
    ):
        self.home_exercises = list(HOME_EXERCISES if home_exercises is None else home_exercises)
        self.gym_exercises = list(GYM_EXERCISES if gym_exercises is None else gym_exercises)

    def build(self, profile: UserProfile) -> TrainingPlan:
        """
        Build sessions and the 7-slot schedule.

        Raises:
            UnsupportedSplitError: days_per_week is not 2, 3, 4 or 5
        """
        if profile.days_per_week not in SUPPORTED_DAYS_PER_WEEK:
            raise UnsupportedSplitError(profile.days_per_week)

        split_name, _ = SPLITS[profile.days_per_week]
        sessions = self.build_sessions(profile)

        schedule = [ScheduleEntry(day=day) for day in range(7)]
        weekdays = SESSION_WEEKDAYS[profile.days_per_week]
        for index, session in enumerate(sessions):
            day = weekdays[index]
            schedule[day] = ScheduleEntry(day=day, session_id=session.id)

        return TrainingPlan(split=split_name, sessions=sessions, schedule=schedule)

    def build_sessions(self, profile: UserProfile) -> List[WorkoutSession]:
        _, focuses = SPLITS[profile.days_per_week]
        difficulty = (
            SessionDifficulty.BEGINNER
            if profile.activity_level == ActivityLevel.SEDENTARY
            else SessionDifficulty.INTERMEDIATE
        )

        sessions = []
        for index, focus in enumerate(focuses, start=1):
            exercises = self.pick_exercises(focus, profile, EXERCISES_PER_SESSION)
            if len(exercises) < EXERCISES_PER_SESSION:
                logger.warning(
                    f"Session {focus.value}-{index} has only {len(exercises)} exercises",
                    extra={"extra_fields": {
                        "focus": focus.value,
                        "location": profile.equipment.location.value,
                        "exercise_count": len(exercises),
                    }},
                )
            sessions.append(WorkoutSession(
                id=f"{focus.value}-{index}",
                title=f"{focus.value.capitalize()} {index}",
                focus=focus,
                difficulty=difficulty,
                duration_minutes=SESSION_DURATION_MINUTES,
                notes=FULL_BODY_NOTE if focus == Focus.FULL else DEFAULT_NOTE,
                exercises=exercises,
            ))
        return sessions

    def pick_exercises(
        self,
        focus: Focus,
        profile: UserProfile,
        count: int = EXERCISES_PER_SESSION,
    ) -> List[WorkoutExercise]:
        """
        Fill up to ``count`` slots: ``count - 1`` primary picks first, then
        core/mobility work, then any primary picks left over. Short pools give
        short sessions, never padding.
        """
        base_pool = self._base_pool(profile.equipment.location)
        tailored = [e for e in base_pool if exercise_matches_profile(e, profile)]
        compatible = FOCUS_COMPATIBILITY.get(focus, frozenset({focus}))

        def matching(pool: Iterable[WorkoutExercise], focuses) -> List[WorkoutExercise]:
            return [e for e in pool if e.focus in focuses]

        primary = first_acceptable([
            lambda: matching(tailored, compatible),
            lambda: matching(base_pool, compatible),
        ]) or []
        complementary = first_acceptable([
            lambda: matching(tailored, COMPLEMENTARY_FOCUSES),
            lambda: matching(base_pool, COMPLEMENTARY_FOCUSES),
        ]) or []

        selected: List[WorkoutExercise] = []
        used: Set[str] = set()

        def take(pool: List[WorkoutExercise], limit: int):
            for exercise in pool:
                if len(selected) >= limit:
                    break
                if exercise.id not in used:
                    selected.append(exercise)
                    used.add(exercise.id)

        take(primary, count - 1)
        take(complementary, count)
        take(primary, count)
        return selected

    def _base_pool(self, location: EquipmentLocation) -> List[WorkoutExercise]:
        if location == EquipmentLocation.HOME:
            return self.home_exercises
        return self.gym_exercises


def build_training_plan(profile: UserProfile) -> TrainingPlan:
    """Module-level shortcut using the default catalogs."""
    return TrainingPlanBuilder().build(profile)
