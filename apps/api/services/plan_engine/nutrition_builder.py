"""
Nutrition Plan Builder

Turns a profile, the mid-tier calorie target and the 7-day intensity
rotation into a week of menus.

Pipeline:
1. Macro targets per day type (protein/fat per kg, carbs fill the rest).
2. Candidate pools, computed once per plan:
   restrictions (allergies, dislikes) -> diet preference -> health conditions.
3. For each day of the rotation and each (meal type, calorie share) slot,
   the lowest-scoring candidate wins, preferring meals not yet used that week.

The used-meal set is an explicit accumulator handed from day to day, so any
single day can be rebuilt in isolation given the set it started with.

Usage:
    builder = NutritionPlanBuilder()
    nutrition = builder.build(profile, target_calories, rotation)
"""

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from .catalog import MEAL_SWAPS, MEALS
from .constants import (
    ACTIVITY_MULTIPLIERS,
    ALLOWED_DIET_TYPES,
    BMR_SEX_OFFSET,
    DAY_NAMES,
    DAY_TYPE_MULTIPLIERS,
    DAY_TYPE_TAG_BONUS,
    FALLBACK_DAY_MEALS,
    FATS_PER_KG,
    GOAL_ADJUSTMENTS,
    HASHIMOTO_EXTRA_FATS_G,
    HEALTH_ALL_MATCH_BONUS,
    HEALTH_ANY_MATCH_BONUS,
    HEALTH_NO_MATCH_PENALTY,
    HIGH_PROTEIN_BONUS,
    HIGH_PROTEIN_TAG,
    INSULIN_CARB_FACTOR,
    KCAL_PER_GRAM,
    MEAL_DISTRIBUTION,
    MIN_CARB_CALORIES,
    MIN_HEALTH_POOL_SIZE,
    PROTEIN_PER_KG,
    DayIntensity,
    DietPreference,
    HealthCondition,
    MealType,
)
from .models import (
    DailyNutritionPlan,
    MacroTargets,
    MealRecipe,
    MealSuggestion,
    NutritionPlan,
    UserProfile,
)
from .selection import first_acceptable

logger = logging.getLogger(__name__)


# =============================================================================
# ENERGY MODEL
# =============================================================================

def estimate_bmr(profile: UserProfile) -> float:
    """Mifflin-St Jeor BMR with the fixed female offset."""
    return 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age + BMR_SEX_OFFSET


def estimate_tdee(profile: UserProfile) -> float:
    return estimate_bmr(profile) * ACTIVITY_MULTIPLIERS[profile.activity_level]


def calculate_target_calories(profile: UserProfile) -> int:
    """
    Mid-tier daily calories: TDEE adjusted for the goal.

    Example:
        68 kg, 168 cm, 28 y, light, lose
        BMR 1519 -> TDEE 2202.55 -> 2202.55 * 0.82 = 1806
    """
    return round(estimate_tdee(profile) * (1 + GOAL_ADJUSTMENTS[profile.goal]))


def calculate_macro_targets(
    profile: UserProfile,
    mid_calories: float,
) -> Dict[DayIntensity, MacroTargets]:
    """
    Per-day-type calorie and macro targets.

    Protein and fat are set per kg of body weight; carbs take whatever
    calories remain (never less than MIN_CARB_CALORIES worth).
    """
    protein = PROTEIN_PER_KG[profile.goal] * profile.weight_kg
    fats = FATS_PER_KG[profile.goal] * profile.weight_kg
    if profile.has_condition(HealthCondition.HASHIMOTO):
        fats += HASHIMOTO_EXTRA_FATS_G

    remaining = max(
        mid_calories - (protein * KCAL_PER_GRAM["protein"] + fats * KCAL_PER_GRAM["fats"]),
        MIN_CARB_CALORIES,
    )
    carbs = remaining / KCAL_PER_GRAM["carbs"]
    if profile.has_condition(HealthCondition.IR, HealthCondition.PCOS):
        carbs *= INSULIN_CARB_FACTOR

    targets = {}
    for day_type, multipliers in DAY_TYPE_MULTIPLIERS.items():
        targets[day_type] = MacroTargets(
            calories=round(mid_calories * multipliers["calories"]),
            protein=round(protein * multipliers["protein"]),
            carbs=round(carbs * multipliers["carbs"]),
            fats=round(fats * multipliers["fats"]),
        )
    return targets


# =============================================================================
# CANDIDATE FILTERING
# =============================================================================

def matches_restrictions(profile: UserProfile, meal: MealRecipe) -> bool:
    """False if any ingredient name contains an allergy or disliked food."""
    ingredients = " ".join(i.name.lower() for i in meal.ingredients)
    excluded = [term.strip().lower() for term in (*profile.allergies, *profile.disliked_foods)]
    return not any(term and term in ingredients for term in excluded)


def filter_by_diet(preference: DietPreference, meals: Sequence[MealRecipe]) -> List[MealRecipe]:
    allowed = ALLOWED_DIET_TYPES.get(preference, ALLOWED_DIET_TYPES[DietPreference.OMNIVORE])
    return [m for m in meals if any(d in allowed for d in m.diet_types)]


def _condition_keys(profile: UserProfile) -> List[str]:
    return [c.value.lower() for c in profile.health_conditions]


def _tag_hits(meal: MealRecipe, conditions: Sequence[str]) -> List[bool]:
    tags = [t.lower() for t in meal.tags]
    return [any(condition in tag for tag in tags) for condition in conditions]


def filter_by_health(profile: UserProfile, meals: Sequence[MealRecipe]) -> List[MealRecipe]:
    """
    Narrow to meals suited to the user's conditions without starving the pool.

    Prefers meals tagged for every condition, then meals tagged for any of
    them; each narrower pool is only kept when it holds at least
    MIN_HEALTH_POOL_SIZE meals.
    """
    conditions = _condition_keys(profile)
    if not conditions:
        return list(meals)

    def enough(pool: List[MealRecipe]) -> bool:
        return len(pool) >= MIN_HEALTH_POOL_SIZE

    return first_acceptable([
        lambda: [m for m in meals if all(_tag_hits(m, conditions))],
        lambda: [m for m in meals if any(_tag_hits(m, conditions))],
        lambda: list(meals),
    ], accept=enough) or list(meals)


@dataclass(frozen=True)
class CandidatePools:
    """The three pools slot selection falls back through, narrowest first."""
    health_filtered: Tuple[MealRecipe, ...]
    diet_filtered: Tuple[MealRecipe, ...]
    unrestricted: Tuple[MealRecipe, ...]

    def in_order(self) -> List[Tuple[str, Tuple[MealRecipe, ...]]]:
        return [
            ("health", self.health_filtered),
            ("diet", self.diet_filtered),
            ("unrestricted", self.unrestricted),
        ]


def build_candidate_pools(profile: UserProfile, meals: Sequence[MealRecipe]) -> CandidatePools:
    # Allergies and dislikes apply to every pool, the widest one included
    unrestricted = [m for m in meals if matches_restrictions(profile, m)]
    diet_filtered = filter_by_diet(profile.diet_preference, unrestricted)
    health_filtered = filter_by_health(profile, diet_filtered)
    return CandidatePools(
        health_filtered=tuple(health_filtered),
        diet_filtered=tuple(diet_filtered),
        unrestricted=tuple(unrestricted),
    )


# =============================================================================
# SCORING + SELECTION
# =============================================================================

def score_meal(
    meal: MealRecipe,
    target_calories: float,
    day_type: DayIntensity,
    profile: UserProfile,
) -> float:
    """Lower is better: calorie distance minus tag bonuses."""
    score = abs(meal.calories - target_calories)

    tag, bonus = DAY_TYPE_TAG_BONUS[day_type]
    if tag in meal.tags:
        score += bonus
    if HIGH_PROTEIN_TAG in meal.tags:
        score += HIGH_PROTEIN_BONUS

    conditions = _condition_keys(profile)
    if conditions:
        hits = _tag_hits(meal, conditions)
        if all(hits):
            score += HEALTH_ALL_MATCH_BONUS
        elif any(hits):
            score += HEALTH_ANY_MATCH_BONUS
        else:
            score += HEALTH_NO_MATCH_PENALTY
    return score


def pick_meal(
    pool: Sequence[MealRecipe],
    meal_type: MealType,
    day_type: DayIntensity,
    target_calories: float,
    used_ids: FrozenSet[str],
    profile: UserProfile,
) -> Optional[MealRecipe]:
    """
    Best-scoring meal of ``meal_type`` in ``pool``.

    Unused meals are preferred; reuse only happens once every candidate of
    that type has appeared this week. Ties keep catalog order.
    """
    candidates = [m for m in pool if m.meal_type == meal_type]
    if not candidates:
        return None
    unused = [m for m in candidates if m.id not in used_ids]
    return min(
        unused or candidates,
        key=lambda meal: score_meal(meal, target_calories, day_type, profile),
    )


def sum_meals(meals: Sequence[MealRecipe]) -> MacroTargets:
    """Rounded totals; rounding happens once, after summing."""
    return MacroTargets(
        calories=round(sum(m.calories for m in meals)),
        protein=round(sum(m.protein for m in meals)),
        carbs=round(sum(m.carbs for m in meals)),
        fats=round(sum(m.fats for m in meals)),
    )


class NutritionPlanBuilder:
    """Builds the weekly menu. Meal catalog and swaps are injectable."""

    def __init__(
        self,
        meals: Optional[Sequence[MealRecipe]] = None,
        swaps: Optional[Sequence[MealSuggestion]] = None,
    ):
        self.meals = list(MEALS if meals is None else meals)
        self.swaps = list(MEAL_SWAPS if swaps is None else swaps)

    def build(
        self,
        profile: UserProfile,
        weekly_calories: float,
        rotation: Sequence[DayIntensity],
    ) -> NutritionPlan:
        targets = calculate_macro_targets(profile, weekly_calories)
        pools = build_candidate_pools(profile, self.meals)

        logger.debug(
            "Nutrition candidate pools",
            extra={"extra_fields": {
                "health_filtered": len(pools.health_filtered),
                "diet_filtered": len(pools.diet_filtered),
                "unrestricted": len(pools.unrestricted),
            }},
        )

        weekly_plan: List[DailyNutritionPlan] = []
        used_ids: FrozenSet[str] = frozenset()
        for day_index, day_type in enumerate(rotation):
            day_plan, used_ids = self.build_day(
                day_index, day_type, targets[day_type], pools, used_ids, profile,
            )
            weekly_plan.append(day_plan)

        plan_by_day_type = {
            day_type: self._first_of_type(weekly_plan, day_type)
            or self._synthetic_day(day_type, targets[day_type], pools)
            for day_type in DayIntensity
        }

        return NutritionPlan(
            rotation=list(rotation),
            plan_by_day_type=plan_by_day_type,
            weekly_plan=weekly_plan,
            targets_by_day_type=targets,
        )

    def build_day(
        self,
        day_index: int,
        day_type: DayIntensity,
        targets: MacroTargets,
        pools: CandidatePools,
        used_ids: FrozenSet[str],
        profile: UserProfile,
    ) -> Tuple[DailyNutritionPlan, FrozenSet[str]]:
        """
        Fill every slot of one day.

        Returns the day and the used-meal set to hand to the next day.
        """
        meals: List[MealRecipe] = []
        for meal_type, ratio in MEAL_DISTRIBUTION[day_type]:
            slot_calories = targets.calories * ratio
            picked = first_acceptable(
                [
                    (lambda name=name, pool=pool: (name, pick_meal(
                        pool, meal_type, day_type, slot_calories, used_ids, profile,
                    )))
                    for name, pool in pools.in_order()
                ],
                accept=lambda found: found[1] is not None,
            )
            if picked is None:
                logger.warning(
                    f"No {meal_type.value} candidate for {day_type.value} day {day_index}",
                    extra={"extra_fields": {"meal_type": meal_type.value, "day_index": day_index}},
                )
                continue
            source, chosen = picked
            if source != "health":
                logger.warning(
                    f"{meal_type.value} for day {day_index} taken from the {source} pool",
                    extra={"extra_fields": {
                        "meal_type": meal_type.value,
                        "day_index": day_index,
                        "pool": source,
                        "meal_id": chosen.id,
                    }},
                )
            meals.append(chosen)
            used_ids = used_ids | {chosen.id}

        if not meals:
            meals = list(pools.health_filtered[:FALLBACK_DAY_MEALS])
            logger.warning(
                f"Day {day_index} had no slot matches, using {len(meals)} fallback meals",
                extra={"extra_fields": {"day_index": day_index, "day_type": day_type.value}},
            )

        totals = sum_meals(meals)
        day_plan = DailyNutritionPlan(
            day_type=day_type,
            calories=totals.calories,
            protein=totals.protein,
            carbs=totals.carbs,
            fats=totals.fats,
            meals=meals,
            swaps=list(self.swaps),
            targets=targets,
            day_index=day_index,
            day_name=DAY_NAMES[day_index % 7],
        )
        return day_plan, used_ids

    @staticmethod
    def _first_of_type(
        weekly_plan: Sequence[DailyNutritionPlan],
        day_type: DayIntensity,
    ) -> Optional[DailyNutritionPlan]:
        return next((day for day in weekly_plan if day.day_type == day_type), None)

    def _synthetic_day(
        self,
        day_type: DayIntensity,
        targets: MacroTargets,
        pools: CandidatePools,
    ) -> DailyNutritionPlan:
        """Stand-in for a day type the rotation never uses."""
        pool = list(pools.health_filtered)
        if day_type == DayIntensity.LOW:
            pool = [m for m in pool if m.meal_type != MealType.DESSERT]
        meals = pool[:len(MEAL_DISTRIBUTION[day_type])]
        totals = sum_meals(meals)
        return DailyNutritionPlan(
            day_type=day_type,
            calories=totals.calories,
            protein=totals.protein,
            carbs=totals.carbs,
            fats=totals.fats,
            meals=meals,
            swaps=list(self.swaps),
            targets=targets,
        )
