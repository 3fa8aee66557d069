"""
Plan Engine Data Model

Dataclasses for the profile, the content catalogs, the generated plan and the
derived calendar projection.

Every model serializes with ``to_dict()`` (snake_case keys, enum values, ISO
dates) so it can be handed verbatim to whatever stores it. Inbound models also
offer ``from_dict()`` for payloads coming back from storage or the API.
"""

from dataclasses import dataclass, field, fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .constants import (
    ActivityLevel,
    DayIntensity,
    DietPreference,
    EquipmentLocation,
    ExerciseIntensity,
    Focus,
    Goal,
    HabitCategory,
    HealthCondition,
    MealType,
    SessionDifficulty,
    SubscriptionTier,
)
from .dates import parse_local_date


def _serialize(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: _serialize(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    if isinstance(value, dict):
        return {_serialize(key): _serialize(item) for key, item in value.items()}
    return value


class Serializable:
    """Mixin providing a JSON-ready ``to_dict``."""

    def to_dict(self) -> Dict[str, Any]:
        return _serialize(self)


# =============================================================================
# PROFILE
# =============================================================================

@dataclass(frozen=True)
class Equipment(Serializable):
    location: EquipmentLocation
    items: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Equipment":
        return cls(
            location=EquipmentLocation(data["location"]),
            items=tuple(data.get("items") or ()),
        )


@dataclass(frozen=True)
class UserProfile(Serializable):
    """Onboarding questionnaire answers. Ranges are validated upstream."""
    age: int
    height_cm: float
    weight_kg: float
    goal: Goal
    activity_level: ActivityLevel
    equipment: Equipment
    days_per_week: int
    diet_preference: DietPreference
    allergies: Tuple[str, ...] = ()
    disliked_foods: Tuple[str, ...] = ()
    sleep_hours: float = 7.0
    stress_level: int = 3
    health_conditions: Tuple[HealthCondition, ...] = ()

    # Optional menstrual cycle tracking
    cycle_length_days: Optional[int] = None
    period_length_days: Optional[int] = None
    last_period_date: Optional[str] = None

    def has_condition(self, *conditions: HealthCondition) -> bool:
        return any(c in self.health_conditions for c in conditions)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserProfile":
        return cls(
            age=int(data["age"]),
            height_cm=data["height_cm"],
            weight_kg=data["weight_kg"],
            goal=Goal(data["goal"]),
            activity_level=ActivityLevel(data["activity_level"]),
            equipment=Equipment.from_dict(data["equipment"]),
            days_per_week=int(data["days_per_week"]),
            diet_preference=DietPreference(data["diet_preference"]),
            allergies=tuple(data.get("allergies") or ()),
            disliked_foods=tuple(data.get("disliked_foods") or ()),
            sleep_hours=data.get("sleep_hours", 7.0),
            stress_level=int(data.get("stress_level", 3)),
            health_conditions=tuple(
                HealthCondition(c) for c in data.get("health_conditions") or ()
            ),
            cycle_length_days=data.get("cycle_length_days"),
            period_length_days=data.get("period_length_days"),
            last_period_date=data.get("last_period_date"),
        )


@dataclass(frozen=True)
class ProfileSnapshot(Serializable):
    """A timestamped copy of the profile kept in plan history."""
    captured_at: str
    profile: UserProfile

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProfileSnapshot":
        return cls(
            captured_at=data["captured_at"],
            profile=UserProfile.from_dict(data["profile"]),
        )


# =============================================================================
# TRAINING
# =============================================================================

@dataclass(frozen=True)
class WorkoutExercise(Serializable):
    """Catalog entry. Empty tag tuples mean "applies to everyone"."""
    id: str
    name: str
    equipment: str
    focus: Focus
    instructions: str
    sets: int
    rep_range: str
    tempo: Optional[str] = None
    rest_seconds: Optional[int] = None
    goal_tags: Tuple[Goal, ...] = ()
    health_tags: Tuple[HealthCondition, ...] = ()
    intensity: Optional[ExerciseIntensity] = None
    preferred_location: Optional[EquipmentLocation] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkoutExercise":
        intensity = data.get("intensity")
        location = data.get("preferred_location")
        return cls(
            id=data["id"],
            name=data["name"],
            equipment=data.get("equipment", ""),
            focus=Focus(data["focus"]),
            instructions=data.get("instructions", ""),
            sets=int(data.get("sets", 0)),
            rep_range=data.get("rep_range", ""),
            tempo=data.get("tempo"),
            rest_seconds=data.get("rest_seconds"),
            goal_tags=tuple(Goal(g) for g in data.get("goal_tags") or ()),
            health_tags=tuple(HealthCondition(h) for h in data.get("health_tags") or ()),
            intensity=ExerciseIntensity(intensity) if intensity else None,
            preferred_location=EquipmentLocation(location) if location else None,
        )


@dataclass
class WorkoutSession(Serializable):
    id: str
    title: str
    focus: Focus
    difficulty: SessionDifficulty
    duration_minutes: int
    notes: str
    exercises: List[WorkoutExercise] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkoutSession":
        return cls(
            id=data["id"],
            title=data["title"],
            focus=Focus(data["focus"]),
            difficulty=SessionDifficulty(data["difficulty"]),
            duration_minutes=int(data["duration_minutes"]),
            notes=data.get("notes", ""),
            exercises=[WorkoutExercise.from_dict(e) for e in data.get("exercises") or []],
        )


@dataclass
class ScheduleEntry(Serializable):
    day: int  # 0=Monday, 6=Sunday
    session_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScheduleEntry":
        return cls(day=int(data["day"]), session_id=data.get("session_id"))


@dataclass
class TrainingPlan(Serializable):
    split: str
    sessions: List[WorkoutSession]
    schedule: List[ScheduleEntry]

    def session_lookup(self) -> Dict[str, WorkoutSession]:
        return {s.id: s for s in self.sessions}

    def session_id_for_day(self, day: int) -> Optional[str]:
        for entry in self.schedule:
            if entry.day == day:
                return entry.session_id
        return None

    @property
    def training_days(self) -> List[int]:
        return [entry.day for entry in self.schedule if entry.session_id]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TrainingPlan":
        return cls(
            split=data["split"],
            sessions=[WorkoutSession.from_dict(s) for s in data.get("sessions") or []],
            schedule=[ScheduleEntry.from_dict(e) for e in data.get("schedule") or []],
        )


# =============================================================================
# NUTRITION
# =============================================================================

@dataclass(frozen=True)
class MealIngredient(Serializable):
    name: str
    quantity: float
    unit: str
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fats: float = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MealIngredient":
        return cls(
            name=data["name"],
            quantity=data.get("quantity", 0),
            unit=data.get("unit", ""),
            calories=data.get("calories", 0),
            protein=data.get("protein", 0),
            carbs=data.get("carbs", 0),
            fats=data.get("fats", 0),
        )


@dataclass(frozen=True)
class MealRecipe(Serializable):
    id: str
    title: str
    meal_type: MealType
    diet_types: Tuple[DietPreference, ...]
    calories: float
    protein: float
    carbs: float
    fats: float
    tags: Tuple[str, ...] = ()
    ingredients: Tuple[MealIngredient, ...] = ()
    instructions: Tuple[str, ...] = ()
    prep_time_minutes: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MealRecipe":
        return cls(
            id=data["id"],
            title=data["title"],
            meal_type=MealType(data["meal_type"]),
            diet_types=tuple(DietPreference(d) for d in data.get("diet_types") or ()),
            calories=data["calories"],
            protein=data["protein"],
            carbs=data["carbs"],
            fats=data["fats"],
            tags=tuple(data.get("tags") or ()),
            ingredients=tuple(MealIngredient.from_dict(i) for i in data.get("ingredients") or ()),
            instructions=tuple(data.get("instructions") or ()),
            prep_time_minutes=data.get("prep_time_minutes"),
        )


@dataclass(frozen=True)
class MealSuggestion(Serializable):
    """A quick swap idea shown next to the day's meals."""
    id: str
    title: str
    icon: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MealSuggestion":
        return cls(id=data["id"], title=data["title"], icon=data.get("icon", ""))


@dataclass(frozen=True)
class MacroTargets(Serializable):
    calories: int
    protein: int
    carbs: int
    fats: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MacroTargets":
        return cls(
            calories=int(data["calories"]),
            protein=int(data["protein"]),
            carbs=int(data["carbs"]),
            fats=int(data["fats"]),
        )


@dataclass
class DailyNutritionPlan(Serializable):
    """
    One day-type's menu.

    calories/protein/carbs/fats are the rounded sum of ``meals``;
    ``targets`` holds the tier targets the meals were picked against.
    """
    day_type: DayIntensity
    calories: int
    protein: int
    carbs: int
    fats: int
    meals: List[MealRecipe]
    swaps: List[MealSuggestion] = field(default_factory=list)
    targets: Optional[MacroTargets] = None
    day_index: Optional[int] = None
    day_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DailyNutritionPlan":
        targets = data.get("targets")
        return cls(
            day_type=DayIntensity(data["day_type"]),
            calories=int(data["calories"]),
            protein=int(data["protein"]),
            carbs=int(data["carbs"]),
            fats=int(data["fats"]),
            meals=[MealRecipe.from_dict(m) for m in data.get("meals") or []],
            swaps=[MealSuggestion.from_dict(s) for s in data.get("swaps") or []],
            targets=MacroTargets.from_dict(targets) if targets else None,
            day_index=data.get("day_index"),
            day_name=data.get("day_name"),
        )


@dataclass
class NutritionPlan(Serializable):
    rotation: List[DayIntensity]
    plan_by_day_type: Dict[DayIntensity, DailyNutritionPlan]
    weekly_plan: List[DailyNutritionPlan]
    targets_by_day_type: Dict[DayIntensity, MacroTargets] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NutritionPlan":
        return cls(
            rotation=[DayIntensity(d) for d in data["rotation"]],
            plan_by_day_type={
                DayIntensity(k): DailyNutritionPlan.from_dict(v)
                for k, v in (data.get("plan_by_day_type") or {}).items()
            },
            weekly_plan=[DailyNutritionPlan.from_dict(d) for d in data.get("weekly_plan") or []],
            targets_by_day_type={
                DayIntensity(k): MacroTargets.from_dict(v)
                for k, v in (data.get("targets_by_day_type") or {}).items()
            },
        )


# =============================================================================
# HABITS
# =============================================================================

@dataclass(frozen=True)
class Habit(Serializable):
    id: str
    title: str
    description: str
    category: HabitCategory

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Habit":
        return cls(
            id=data["id"],
            title=data["title"],
            description=data.get("description", ""),
            category=HabitCategory(data["category"]),
        )


@dataclass
class HabitPlan(Serializable):
    daily_habits: List[Habit]
    weekly_challenge: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HabitPlan":
        return cls(
            daily_habits=[Habit.from_dict(h) for h in data.get("daily_habits") or []],
            weekly_challenge=data.get("weekly_challenge", ""),
        )


# =============================================================================
# PLAN + LOGS
# =============================================================================

@dataclass
class GeneratedPlan(Serializable):
    """The persisted root aggregate for one user."""
    id: str
    created_at: str
    subscription_start: date
    subscription_end: date
    subscription_tier: SubscriptionTier
    profile_snapshot: ProfileSnapshot
    profile_history: List[ProfileSnapshot]
    training: TrainingPlan
    nutrition: NutritionPlan
    habits: HabitPlan

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeneratedPlan":
        """Parse a complete payload. Use ``plan_state.normalize_plan`` for legacy ones."""
        return cls(
            id=data["id"],
            created_at=data["created_at"],
            subscription_start=parse_local_date(data["subscription_start"]),
            subscription_end=parse_local_date(data["subscription_end"]),
            subscription_tier=SubscriptionTier(data["subscription_tier"]),
            profile_snapshot=ProfileSnapshot.from_dict(data["profile_snapshot"]),
            profile_history=[ProfileSnapshot.from_dict(s) for s in data.get("profile_history") or []],
            training=TrainingPlan.from_dict(data["training"]),
            nutrition=NutritionPlan.from_dict(data["nutrition"]),
            habits=HabitPlan.from_dict(data["habits"]),
        )


@dataclass
class DailyLog(Serializable):
    """Completion record for one local calendar day."""
    date: str
    energy: Optional[int] = None
    workouts_completed: List[str] = field(default_factory=list)
    meals_completed: List[str] = field(default_factory=list)
    habits_completed: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DailyLog":
        return cls(
            date=data["date"],
            energy=data.get("energy"),
            workouts_completed=list(data.get("workouts_completed") or []),
            meals_completed=list(data.get("meals_completed") or []),
            habits_completed=list(data.get("habits_completed") or []),
        )


# =============================================================================
# CALENDAR (derived, never persisted)
# =============================================================================

@dataclass
class CompletionItem(Serializable):
    id: str
    title: str
    completed: bool = False


@dataclass
class CalendarWorkoutSummary(Serializable):
    id: str
    title: str
    focus: Focus
    completed: bool = False


@dataclass
class CalendarDaySummary(Serializable):
    date: str
    day_number: int
    day_label: str
    in_subscription: bool
    is_today: bool
    is_future: bool
    day_type: Optional[DayIntensity]
    workout: Optional[CalendarWorkoutSummary]
    meals: List[CompletionItem] = field(default_factory=list)
    habits: List[CompletionItem] = field(default_factory=list)


@dataclass
class CalendarData(Serializable):
    start: str
    end: str
    weeks: List[List[CalendarDaySummary]]
    days_by_date: Dict[str, CalendarDaySummary]
