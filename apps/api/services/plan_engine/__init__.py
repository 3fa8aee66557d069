# Plan Engine
#
# Deterministic generation of a member's weekly plan:
# - Training split + sessions from the exercise catalog
# - Day-intensity rotation driving calorie tiers
# - Weekly menu scored and selected from the meal catalog
# - Daily habits adjusted to sleep and stress
#
# No I/O. Callers persist the returned GeneratedPlan themselves.

from .constants import (
    ActivityLevel,
    DayIntensity,
    DietPreference,
    EquipmentLocation,
    Focus,
    Goal,
    HealthCondition,
    MealType,
    SubscriptionTier,
)
from .models import (
    CalendarData,
    CalendarDaySummary,
    DailyLog,
    DailyNutritionPlan,
    Equipment,
    GeneratedPlan,
    ProfileSnapshot,
    UserProfile,
)
from .training_builder import TrainingPlanBuilder, UnsupportedSplitError, build_training_plan
from .nutrition_builder import NutritionPlanBuilder, calculate_macro_targets, calculate_target_calories
from .habit_builder import build_habit_plan
from .generator import PlanGenerator, create_rotation, generate_plan

__all__ = [
    # Main generator
    'PlanGenerator',
    'generate_plan',
    'create_rotation',

    # Builders
    'TrainingPlanBuilder',
    'UnsupportedSplitError',
    'build_training_plan',
    'NutritionPlanBuilder',
    'calculate_macro_targets',
    'calculate_target_calories',
    'build_habit_plan',

    # Models
    'CalendarData',
    'CalendarDaySummary',
    'DailyLog',
    'DailyNutritionPlan',
    'Equipment',
    'GeneratedPlan',
    'ProfileSnapshot',
    'UserProfile',

    # Constants
    'ActivityLevel',
    'DayIntensity',
    'DietPreference',
    'EquipmentLocation',
    'Focus',
    'Goal',
    'HealthCondition',
    'MealType',
    'SubscriptionTier',
]
