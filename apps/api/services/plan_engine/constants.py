"""
Constants for plan generation.

Every lookup table the builders consult lives here: splits, weekday slots,
energy-model multipliers, macro tier multipliers and meal distribution.
"""

from enum import Enum
from typing import Dict, FrozenSet, List, Tuple


class Goal(str, Enum):
    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    HIGH = "high"


class DietPreference(str, Enum):
    OMNIVORE = "omnivore"
    PESCATARIAN = "pescatarian"
    VEGETARIAN = "vegetarian"
    KETO = "keto"
    CARNIVORE = "carnivore"
    MIXED = "mixed"


class HealthCondition(str, Enum):
    IR = "IR"                  # insulin resistance
    HASHIMOTO = "Hashimoto"
    PCOS = "PCOS"


class DayIntensity(str, Enum):
    """Calorie/training tier of a single day."""
    LOW = "low"
    MID = "mid"
    HIGH = "high"


class EquipmentLocation(str, Enum):
    HOME = "home"
    GYM = "gym"


class Focus(str, Enum):
    """Muscle-group / modality tag on exercises and sessions."""
    UPPER = "upper"
    LOWER = "lower"
    FULL = "full"
    CORE = "core"
    CARDIO = "cardio"
    PUSH = "push"
    PULL = "pull"
    MOBILITY = "mobility"


class ExerciseIntensity(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class SessionDifficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
    DESSERT = "dessert"


class HabitCategory(str, Enum):
    HYDRATION = "hydration"
    SLEEP = "sleep"
    MOBILITY = "mobility"
    MINDFULNESS = "mindfulness"
    NUTRITION = "nutrition"


class SubscriptionTier(str, Enum):
    """Which part of the plan the member chose to follow."""
    UNSELECTED = "unselected"
    NUTRITION = "nutrition"
    TRAINING = "training"
    HABITS = "habits"
    FULL = "full"


# =============================================================================
# TRAINING
# =============================================================================

# days_per_week -> (split name, ordered session focuses)
SPLITS: Dict[int, Tuple[str, List[Focus]]] = {
    2: ("Full Body A/B", [Focus.FULL, Focus.FULL]),
    3: ("Upper / Lower / Full", [Focus.UPPER, Focus.LOWER, Focus.FULL]),
    4: ("Upper / Lower x2", [Focus.UPPER, Focus.LOWER, Focus.UPPER, Focus.LOWER]),
    5: (
        "Push / Pull / Legs / Upper / Lower",
        [Focus.PUSH, Focus.PULL, Focus.LOWER, Focus.UPPER, Focus.LOWER],
    ),
}

# days_per_week -> weekday index (0=Monday) of each session, in split order
SESSION_WEEKDAYS: Dict[int, List[int]] = {
    2: [1, 4],            # Tue, Fri
    3: [0, 2, 4],         # Mon, Wed, Fri
    4: [0, 1, 3, 4],      # Mon, Tue, Thu, Fri
    5: [0, 1, 2, 3, 4],   # Mon-Fri
}

SUPPORTED_DAYS_PER_WEEK = frozenset(SPLITS)

# Session focus -> exercise focuses that count as a primary match
FOCUS_COMPATIBILITY: Dict[Focus, FrozenSet[Focus]] = {
    Focus.FULL: frozenset({Focus.FULL, Focus.LOWER, Focus.UPPER}),
    Focus.UPPER: frozenset({Focus.UPPER, Focus.PUSH, Focus.PULL}),
    Focus.LOWER: frozenset({Focus.LOWER}),
    Focus.PUSH: frozenset({Focus.PUSH, Focus.UPPER}),
    Focus.PULL: frozenset({Focus.PULL, Focus.UPPER}),
    Focus.CARDIO: frozenset({Focus.CARDIO}),
    Focus.MOBILITY: frozenset({Focus.MOBILITY}),
    Focus.CORE: frozenset({Focus.CORE}),
}

COMPLEMENTARY_FOCUSES = frozenset({Focus.CORE, Focus.MOBILITY})

EXERCISES_PER_SESSION = 6
SESSION_DURATION_MINUTES = 45

# The first N scheduled training days are high; later ones are mid
HIGH_DAYS_PER_WEEK = 2

# =============================================================================
# NUTRITION
# =============================================================================

ACTIVITY_MULTIPLIERS: Dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.35,
    ActivityLevel.LIGHT: 1.45,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.HIGH: 1.70,
}

GOAL_ADJUSTMENTS: Dict[Goal, float] = {
    Goal.LOSE: -0.18,
    Goal.MAINTAIN: 0.0,
    Goal.GAIN: 0.12,
}

# Mifflin-St Jeor offset. The questionnaire collects no sex field, so the
# female constant is applied to every profile.
BMR_SEX_OFFSET = -161

PROTEIN_PER_KG: Dict[Goal, float] = {
    Goal.LOSE: 1.8,
    Goal.MAINTAIN: 1.8,
    Goal.GAIN: 2.0,
}

FATS_PER_KG: Dict[Goal, float] = {
    Goal.LOSE: 0.9,
    Goal.MAINTAIN: 1.0,
    Goal.GAIN: 1.1,
}

HASHIMOTO_EXTRA_FATS_G = 5
MIN_CARB_CALORIES = 120
# Applied to carbs when IR or PCOS is present
INSULIN_CARB_FACTOR = 0.95

KCAL_PER_GRAM = {"protein": 4, "carbs": 4, "fats": 9}

# Day type -> multipliers applied to the mid-tier base values
DAY_TYPE_MULTIPLIERS: Dict[DayIntensity, Dict[str, float]] = {
    DayIntensity.LOW: {"calories": 0.86, "protein": 1.0, "carbs": 0.82, "fats": 1.05},
    DayIntensity.MID: {"calories": 1.0, "protein": 1.0, "carbs": 1.0, "fats": 1.0},
    DayIntensity.HIGH: {"calories": 1.10, "protein": 1.05, "carbs": 1.10, "fats": 0.95},
}

# Day type -> ordered (meal type, share of daily calories)
MEAL_DISTRIBUTION: Dict[DayIntensity, List[Tuple[MealType, float]]] = {
    DayIntensity.LOW: [
        (MealType.BREAKFAST, 0.30),
        (MealType.LUNCH, 0.40),
        (MealType.DINNER, 0.30),
    ],
    DayIntensity.MID: [
        (MealType.BREAKFAST, 0.28),
        (MealType.LUNCH, 0.34),
        (MealType.DINNER, 0.28),
        (MealType.SNACK, 0.10),
    ],
    DayIntensity.HIGH: [
        (MealType.BREAKFAST, 0.27),
        (MealType.LUNCH, 0.33),
        (MealType.DINNER, 0.25),
        (MealType.SNACK, 0.08),
        (MealType.DESSERT, 0.07),
    ],
}

# Diet preference -> meal diet types it accepts
ALLOWED_DIET_TYPES: Dict[DietPreference, FrozenSet[DietPreference]] = {
    DietPreference.VEGETARIAN: frozenset({DietPreference.VEGETARIAN, DietPreference.MIXED}),
    DietPreference.PESCATARIAN: frozenset({
        DietPreference.PESCATARIAN, DietPreference.MIXED, DietPreference.VEGETARIAN,
    }),
    DietPreference.KETO: frozenset({DietPreference.KETO, DietPreference.CARNIVORE}),
    DietPreference.CARNIVORE: frozenset({DietPreference.CARNIVORE}),
    DietPreference.MIXED: frozenset({
        DietPreference.MIXED, DietPreference.OMNIVORE,
        DietPreference.PESCATARIAN, DietPreference.VEGETARIAN,
    }),
    DietPreference.OMNIVORE: frozenset({DietPreference.OMNIVORE, DietPreference.MIXED}),
}

# Health filtering keeps a narrower pool only when it still has this many meals
MIN_HEALTH_POOL_SIZE = 6

# Scoring bonuses (negative is better)
DAY_TYPE_TAG_BONUS: Dict[DayIntensity, Tuple[str, int]] = {
    DayIntensity.HIGH: ("high-calorie", -40),
    DayIntensity.LOW: ("low-calorie", -30),
    DayIntensity.MID: ("mid-calorie", -20),
}
HIGH_PROTEIN_TAG = "high-protein"
HIGH_PROTEIN_BONUS = -10
HEALTH_ALL_MATCH_BONUS = -40
HEALTH_ANY_MATCH_BONUS = -15
HEALTH_NO_MATCH_PENALTY = 25

# Meals used when a whole day comes out empty
FALLBACK_DAY_MEALS = 3

# =============================================================================
# HABITS
# =============================================================================

HIGH_STRESS_THRESHOLD = 4
MIN_RESTFUL_SLEEP_HOURS = 7
WEEKLY_CHALLENGE = "35k steps + 3 workouts this week"

# =============================================================================
# CALENDAR
# =============================================================================

DEFAULT_SUBSCRIPTION_DAYS = 30

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
DAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
