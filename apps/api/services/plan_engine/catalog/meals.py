"""
Meal catalog.

Recipes are authored ingredient by ingredient; a recipe's calories and macros
are the rounded sum of its ingredients so the two can never drift apart.

Tag vocabulary the nutrition builder reads:
- "low-calorie" / "mid-calorie" / "high-calorie": day-type fit
- "high-protein"
- "ir-friendly" / "hashimoto-friendly" / "pcos-friendly": health fit, matched
  by case-insensitive substring of the condition name
"""

from typing import List, Optional, Sequence, Tuple

from ..constants import DietPreference as Diet, MealType
from ..models import MealIngredient, MealRecipe, MealSuggestion

# (name, quantity, unit, kcal, protein, carbs, fats)
IngredientRow = Tuple[str, float, str, float, float, float, float]


def _meal(
    id: str,
    title: str,
    meal_type: MealType,
    diet_types: Sequence[Diet],
    tags: Sequence[str],
    ingredients: Sequence[IngredientRow],
    instructions: Sequence[str],
    prep_time_minutes: Optional[int] = None,
) -> MealRecipe:
    rows = tuple(MealIngredient(*row) for row in ingredients)
    return MealRecipe(
        id=id,
        title=title,
        meal_type=meal_type,
        diet_types=tuple(diet_types),
        calories=round(sum(i.calories for i in rows)),
        protein=round(sum(i.protein for i in rows)),
        carbs=round(sum(i.carbs for i in rows)),
        fats=round(sum(i.fats for i in rows)),
        tags=tuple(tags),
        ingredients=rows,
        instructions=tuple(instructions),
        prep_time_minutes=prep_time_minutes,
    )


MEALS: List[MealRecipe] = [
    # =========================================================================
    # BREAKFAST
    # =========================================================================
    _meal(
        "greek-yogurt-bowl", "Greek yogurt protein bowl", MealType.BREAKFAST,
        [Diet.VEGETARIAN, Diet.MIXED],
        ["high-protein", "mid-calorie", "ir-friendly", "pcos-friendly", "quick"],
        [
            ("Greek yogurt 2%", 250, "g", 183, 25, 10, 5),
            ("Rolled oats", 40, "g", 150, 5, 27, 3),
            ("Blueberries", 80, "g", 46, 0.6, 12, 0.3),
            ("Walnuts", 15, "g", 98, 2.3, 2, 9.8),
            ("Chia seeds", 10, "g", 49, 1.7, 4.2, 3.1),
        ],
        ["Spoon the yogurt into a bowl.", "Top with oats, blueberries, walnuts and chia."],
        5,
    ),
    _meal(
        "spinach-feta-omelette", "Spinach and feta omelette with rye toast", MealType.BREAKFAST,
        [Diet.VEGETARIAN, Diet.MIXED],
        ["high-protein", "low-calorie", "hashimoto-friendly", "pcos-friendly"],
        [
            ("Eggs", 150, "g", 215, 19, 1, 15),
            ("Spinach", 60, "g", 14, 1.7, 2.2, 0.2),
            ("Feta cheese", 30, "g", 79, 4.3, 1.2, 6.4),
            ("Rye bread", 40, "g", 104, 3.4, 19, 1.3),
            ("Olive oil", 5, "g", 44, 0, 0, 5),
        ],
        [
            "Wilt the spinach in the olive oil.",
            "Pour in the beaten eggs, crumble the feta on top and fold.",
            "Serve with toasted rye bread.",
        ],
        10,
    ),
    _meal(
        "smoked-salmon-toast", "Smoked salmon and avocado toast", MealType.BREAKFAST,
        [Diet.PESCATARIAN, Diet.MIXED],
        ["high-protein", "low-calorie", "hashimoto-friendly", "omega-3"],
        [
            ("Sourdough bread", 60, "g", 160, 6, 31, 1),
            ("Smoked salmon", 80, "g", 94, 15, 0, 3.5),
            ("Light cream cheese", 30, "g", 60, 3, 2, 4.5),
            ("Avocado", 50, "g", 80, 1, 4, 7.3),
            ("Cucumber", 50, "g", 8, 0.3, 1.8, 0.1),
        ],
        ["Toast the bread.", "Spread cream cheese and avocado, top with salmon and cucumber."],
        5,
    ),
    _meal(
        "peanut-butter-overnight-oats", "Peanut butter banana overnight oats", MealType.BREAKFAST,
        [Diet.VEGETARIAN, Diet.MIXED],
        ["high-protein", "high-calorie", "meal-prep"],
        [
            ("Rolled oats", 70, "g", 263, 9, 47, 5),
            ("Semi-skimmed milk", 200, "ml", 94, 6.8, 9.6, 3.4),
            ("Peanut butter", 20, "g", 118, 5, 4, 10),
            ("Banana", 100, "g", 89, 1.1, 23, 0.3),
            ("Whey protein", 20, "g", 78, 16, 1.5, 1),
        ],
        ["Mix oats, milk and whey in a jar.", "Refrigerate overnight, top with banana and peanut butter."],
        5,
    ),
    _meal(
        "turkey-egg-wrap", "Turkey and egg breakfast wrap", MealType.BREAKFAST,
        [Diet.OMNIVORE],
        ["high-protein", "mid-calorie", "ir-friendly", "pcos-friendly", "meal-prep"],
        [
            ("Eggs", 150, "g", 215, 19, 1, 15),
            ("Turkey breast ham", 60, "g", 63, 12, 1, 1.2),
            ("Red bell pepper", 80, "g", 25, 1, 5, 0.2),
            ("Cheddar", 20, "g", 81, 5, 0.3, 6.7),
            ("Whole grain tortilla", 60, "g", 180, 5.5, 30, 4),
        ],
        ["Scramble the eggs with pepper.", "Fill the tortilla with eggs, turkey and cheddar, then roll."],
        10,
    ),
    _meal(
        "bacon-eggs-avocado", "Bacon, eggs and avocado", MealType.BREAKFAST,
        [Diet.KETO],
        ["high-protein", "high-calorie"],
        [
            ("Eggs", 150, "g", 215, 19, 1, 15),
            ("Bacon", 40, "g", 218, 15, 0.6, 17),
            ("Avocado", 80, "g", 128, 1.6, 6.8, 11.7),
            ("Butter", 5, "g", 36, 0, 0, 4),
        ],
        ["Crisp the bacon.", "Fry the eggs in butter and serve with sliced avocado."],
        10,
    ),
    _meal(
        "steak-and-eggs", "Steak and eggs", MealType.BREAKFAST,
        [Diet.CARNIVORE, Diet.KETO],
        ["high-protein", "mid-calorie"],
        [
            ("Sirloin steak", 120, "g", 244, 32, 0, 12.7),
            ("Eggs", 100, "g", 143, 12.6, 0.7, 9.5),
            ("Butter", 10, "g", 72, 0.1, 0, 8.1),
        ],
        ["Sear the steak two minutes per side and rest it.", "Fry the eggs in the butter."],
        15,
    ),
    _meal(
        "cottage-cheese-pancakes", "Cottage cheese oat pancakes", MealType.BREAKFAST,
        [Diet.VEGETARIAN, Diet.MIXED],
        ["high-protein", "mid-calorie", "pcos-friendly"],
        [
            ("Cottage cheese", 150, "g", 147, 17, 5, 6.5),
            ("Eggs", 100, "g", 143, 12.6, 0.7, 9.5),
            ("Oat flour", 40, "g", 160, 6, 26, 3.5),
            ("Raspberries", 80, "g", 42, 1, 9.5, 0.5),
            ("Honey", 10, "g", 30, 0, 8, 0),
        ],
        ["Blend cottage cheese, eggs and oat flour.", "Cook small pancakes, serve with raspberries and honey."],
        15,
    ),

    # =========================================================================
    # LUNCH
    # =========================================================================
    _meal(
        "chicken-quinoa-bowl", "Chicken quinoa power bowl", MealType.LUNCH,
        [Diet.OMNIVORE, Diet.MIXED],
        ["high-protein", "mid-calorie", "ir-friendly", "pcos-friendly", "hashimoto-friendly", "meal-prep"],
        [
            ("Chicken breast", 150, "g", 248, 46, 0, 5.4),
            ("Cooked quinoa", 150, "g", 180, 6.6, 32, 2.9),
            ("Broccoli", 100, "g", 34, 2.8, 7, 0.4),
            ("Olive oil", 10, "g", 88, 0, 0, 10),
            ("Tahini", 15, "g", 89, 2.6, 3.2, 8),
        ],
        ["Grill the chicken and slice it.", "Steam the broccoli.", "Build the bowl and drizzle with tahini and oil."],
        25,
    ),
    _meal(
        "tuna-chickpea-salad", "Tuna and chickpea salad", MealType.LUNCH,
        [Diet.PESCATARIAN, Diet.MIXED],
        ["high-protein", "low-calorie", "ir-friendly", "pcos-friendly", "high-fiber"],
        [
            ("Tuna in water", 120, "g", 139, 31, 0, 1),
            ("Chickpeas", 120, "g", 197, 10.6, 33, 3.1),
            ("Cherry tomatoes", 100, "g", 18, 0.9, 3.9, 0.2),
            ("Red onion", 30, "g", 12, 0.3, 2.8, 0),
            ("Olive oil", 10, "g", 88, 0, 0, 10),
        ],
        ["Drain tuna and chickpeas.", "Toss everything with olive oil, salt and lemon."],
        10,
    ),
    _meal(
        "beef-rice-bowl", "Lean beef and rice bowl", MealType.LUNCH,
        [Diet.OMNIVORE],
        ["high-protein", "high-calorie", "post-workout"],
        [
            ("Lean beef mince", 150, "g", 263, 31, 0, 15),
            ("Cooked basmati rice", 200, "g", 260, 5.4, 57, 0.6),
            ("Bell peppers", 100, "g", 31, 1, 6, 0.3),
            ("Olive oil", 10, "g", 88, 0, 0, 10),
        ],
        ["Brown the mince with peppers in the oil.", "Serve over rice."],
        20,
    ),
    _meal(
        "red-lentil-stew", "Red lentil vegetable stew", MealType.LUNCH,
        [Diet.VEGETARIAN, Diet.MIXED],
        ["mid-calorie", "high-fiber", "ir-friendly", "pcos-friendly", "hashimoto-friendly"],
        [
            ("Red lentils", 80, "g", 282, 19.6, 48, 1.7),
            ("Carrot", 80, "g", 33, 0.7, 7.7, 0.2),
            ("Tomato passata", 150, "g", 48, 2, 8, 0.3),
            ("Spinach", 60, "g", 14, 1.7, 2.2, 0.2),
            ("Olive oil", 10, "g", 88, 0, 0, 10),
            ("Greek yogurt 2%", 50, "g", 37, 5, 2, 1),
        ],
        ["Soften the carrot in oil, add lentils, passata and water.", "Simmer 20 minutes, stir in spinach, top with yogurt."],
        30,
    ),
    _meal(
        "salmon-potato-plate", "Baked salmon with potatoes and green beans", MealType.LUNCH,
        [Diet.PESCATARIAN, Diet.MIXED],
        ["high-protein", "mid-calorie", "hashimoto-friendly", "omega-3"],
        [
            ("Salmon fillet", 140, "g", 291, 28, 0, 19),
            ("Potatoes", 200, "g", 154, 4, 34, 0.2),
            ("Green beans", 100, "g", 31, 1.8, 7, 0.1),
            ("Olive oil", 5, "g", 44, 0, 0, 5),
        ],
        ["Roast potatoes 20 minutes.", "Add salmon and beans to the tray for the last 12 minutes."],
        35,
    ),
    _meal(
        "turkey-hummus-wrap", "Turkey hummus wrap", MealType.LUNCH,
        [Diet.OMNIVORE, Diet.MIXED],
        ["high-protein", "low-calorie", "quick"],
        [
            ("Whole grain tortilla", 70, "g", 210, 6.5, 35, 5),
            ("Roast turkey breast", 100, "g", 104, 22, 1, 1.5),
            ("Hummus", 40, "g", 70, 2.8, 5.6, 4),
            ("Lettuce and tomato", 80, "g", 15, 0.8, 3, 0.2),
            ("Feta cheese", 20, "g", 53, 2.8, 0.8, 4.3),
        ],
        ["Spread hummus on the tortilla.", "Layer turkey, vegetables and feta, then roll tightly."],
        5,
    ),
    _meal(
        "chicken-caesar-salad", "Low-carb chicken Caesar salad", MealType.LUNCH,
        [Diet.KETO],
        ["high-protein", "mid-calorie"],
        [
            ("Chicken thigh", 150, "g", 287, 37, 0, 15),
            ("Romaine lettuce", 100, "g", 17, 1.2, 3.3, 0.3),
            ("Parmesan", 20, "g", 83, 7, 0.8, 5.5),
            ("Caesar dressing", 30, "g", 160, 0.6, 1, 17),
            ("Boiled egg", 50, "g", 72, 6.3, 0.4, 4.8),
        ],
        ["Grill the chicken.", "Toss romaine with dressing and parmesan, top with chicken and egg."],
        20,
    ),
    _meal(
        "cheddar-beef-patties", "Cheddar beef patties", MealType.LUNCH,
        [Diet.CARNIVORE, Diet.KETO],
        ["high-protein", "high-calorie"],
        [
            ("Beef patties", 200, "g", 500, 40, 0, 37),
            ("Cheddar", 30, "g", 121, 7.5, 0.4, 10),
        ],
        ["Grill the patties to your liking.", "Melt the cheddar on top for the last minute."],
        15,
    ),
    _meal(
        "tofu-veggie-stir-fry", "Tofu vegetable stir-fry", MealType.LUNCH,
        [Diet.VEGETARIAN, Diet.MIXED],
        ["high-protein", "mid-calorie", "ir-friendly", "pcos-friendly"],
        [
            ("Firm tofu", 180, "g", 259, 28, 5, 15),
            ("Cooked brown rice", 150, "g", 168, 3.9, 35, 1.4),
            ("Stir-fry vegetables", 150, "g", 60, 3, 11, 0.5),
            ("Soy sauce", 15, "ml", 8, 1.3, 0.8, 0),
            ("Sesame oil", 5, "g", 44, 0, 0, 5),
        ],
        ["Crisp the cubed tofu in sesame oil.", "Add vegetables and soy sauce, serve with rice."],
        20,
    ),

    # =========================================================================
    # DINNER
    # =========================================================================
    _meal(
        "baked-cod-vegetables", "Baked cod with sweet potato and zucchini", MealType.DINNER,
        [Diet.PESCATARIAN, Diet.MIXED],
        ["high-protein", "low-calorie", "hashimoto-friendly", "ir-friendly", "pcos-friendly"],
        [
            ("Cod fillet", 180, "g", 151, 33, 0, 1.3),
            ("Zucchini", 150, "g", 26, 1.8, 4.7, 0.5),
            ("Sweet potato", 150, "g", 129, 2.4, 30, 0.1),
            ("Olive oil", 10, "g", 88, 0, 0, 10),
        ],
        ["Roast sweet potato cubes 15 minutes.", "Add cod and zucchini, bake 12 more minutes."],
        30,
    ),
    _meal(
        "chicken-fajita-plate", "Chicken fajita plate", MealType.DINNER,
        [Diet.OMNIVORE, Diet.MIXED],
        ["high-protein", "mid-calorie", "ir-friendly", "pcos-friendly"],
        [
            ("Chicken breast", 150, "g", 248, 46, 0, 5.4),
            ("Peppers and onion", 150, "g", 45, 1.5, 9.5, 0.3),
            ("Corn tortillas", 52, "g", 114, 2.9, 23, 1.5),
            ("Avocado", 50, "g", 80, 1, 4.3, 7.3),
            ("Tomato salsa", 40, "g", 12, 0.6, 2.6, 0.1),
        ],
        ["Sear chicken strips with peppers and onion.", "Serve in warm tortillas with avocado and salsa."],
        20,
    ),
    _meal(
        "turkey-meatball-pasta", "Turkey meatballs with whole wheat pasta", MealType.DINNER,
        [Diet.OMNIVORE],
        ["high-protein", "high-calorie"],
        [
            ("Turkey mince", 150, "g", 225, 30, 0, 11.5),
            ("Whole wheat pasta", 80, "g", 280, 11, 54, 2),
            ("Tomato passata", 150, "g", 48, 2, 8, 0.3),
            ("Parmesan", 15, "g", 62, 5.3, 0.6, 4.1),
        ],
        ["Roll and bake the meatballs.", "Simmer them in passata and toss with the cooked pasta."],
        35,
    ),
    _meal(
        "garlic-shrimp-zoodles", "Garlic shrimp with zucchini noodles", MealType.DINNER,
        [Diet.PESCATARIAN, Diet.KETO, Diet.MIXED],
        ["high-protein", "low-calorie", "hashimoto-friendly"],
        [
            ("Shrimp", 180, "g", 178, 36, 1.6, 2.7),
            ("Zucchini", 250, "g", 43, 3, 7.8, 0.8),
            ("Garlic butter", 15, "g", 108, 0.1, 0, 12.2),
            ("Parmesan", 10, "g", 42, 3.6, 0.4, 2.8),
        ],
        ["Spiralize the zucchini.", "Sauté shrimp in garlic butter, toss with noodles and parmesan."],
        15,
    ),
    _meal(
        "chickpea-spinach-curry", "Chickpea spinach curry with rice", MealType.DINNER,
        [Diet.VEGETARIAN, Diet.MIXED],
        ["mid-calorie", "high-fiber", "ir-friendly", "pcos-friendly"],
        [
            ("Chickpeas", 200, "g", 328, 17.7, 55, 5.2),
            ("Light coconut milk", 100, "ml", 73, 0.7, 1.7, 7),
            ("Spinach", 80, "g", 18, 2.3, 2.9, 0.3),
            ("Cooked basmati rice", 100, "g", 130, 2.7, 28.5, 0.3),
        ],
        ["Simmer chickpeas in coconut milk with curry paste.", "Stir in spinach and serve over rice."],
        25,
    ),
    _meal(
        "steak-asparagus", "Sirloin with buttered asparagus", MealType.DINNER,
        [Diet.KETO, Diet.OMNIVORE],
        ["high-protein", "mid-calorie", "hashimoto-friendly"],
        [
            ("Sirloin steak", 180, "g", 366, 48, 0, 19),
            ("Asparagus", 150, "g", 30, 3.3, 5.8, 0.2),
            ("Butter", 10, "g", 72, 0.1, 0, 8.1),
        ],
        ["Sear the steak and rest it.", "Toss asparagus in the pan with butter."],
        20,
    ),
    _meal(
        "butter-seared-salmon", "Butter-seared salmon", MealType.DINNER,
        [Diet.CARNIVORE, Diet.KETO],
        ["high-protein", "mid-calorie", "omega-3"],
        [
            ("Salmon fillet", 200, "g", 416, 40, 0, 27),
            ("Butter", 10, "g", 72, 0.1, 0, 8.1),
        ],
        ["Sear the salmon skin-side down, baste with butter for the last two minutes."],
        15,
    ),
    _meal(
        "halloumi-tray-bake", "Halloumi vegetable tray bake with couscous", MealType.DINNER,
        [Diet.VEGETARIAN, Diet.MIXED],
        ["mid-calorie"],
        [
            ("Halloumi", 80, "g", 257, 17, 1.7, 20),
            ("Mixed roasting vegetables", 250, "g", 90, 3, 17, 0.7),
            ("Cooked couscous", 120, "g", 134, 4.6, 27.8, 0.2),
            ("Olive oil", 5, "g", 44, 0, 0, 5),
        ],
        ["Roast vegetables 20 minutes.", "Add sliced halloumi for 10 minutes, serve on couscous."],
        35,
    ),
    _meal(
        "chicken-vegetable-soup", "Chicken vegetable soup", MealType.DINNER,
        [Diet.OMNIVORE, Diet.MIXED],
        ["low-calorie", "hashimoto-friendly", "ir-friendly", "pcos-friendly"],
        [
            ("Chicken thigh", 120, "g", 230, 29.6, 0, 12),
            ("Carrot and celery", 150, "g", 50, 1.2, 11, 0.3),
            ("Potatoes", 150, "g", 116, 3, 25.5, 0.2),
        ],
        ["Simmer chicken with vegetables 30 minutes.", "Shred the chicken back into the soup."],
        40,
    ),

    # =========================================================================
    # SNACK
    # =========================================================================
    _meal(
        "apple-almonds", "Apple with almonds", MealType.SNACK,
        [Diet.VEGETARIAN, Diet.MIXED],
        ["low-calorie", "ir-friendly", "pcos-friendly", "high-fiber"],
        [
            ("Apple", 150, "g", 78, 0.4, 21, 0.3),
            ("Almonds", 15, "g", 87, 3.2, 3.3, 7.5),
        ],
        ["Slice the apple and serve with almonds."],
        2,
    ),
    _meal(
        "whey-shake", "Whey protein shake", MealType.SNACK,
        [Diet.VEGETARIAN, Diet.MIXED],
        ["high-protein", "low-calorie", "post-workout", "quick"],
        [
            ("Whey protein", 30, "g", 117, 24, 2.3, 1.5),
            ("Unsweetened almond milk", 250, "ml", 33, 1, 1.5, 2.7),
        ],
        ["Shake whey with cold almond milk."],
        2,
    ),
    _meal(
        "cottage-cheese-strawberries", "Cottage cheese with strawberries", MealType.SNACK,
        [Diet.VEGETARIAN, Diet.MIXED],
        ["high-protein", "mid-calorie", "pcos-friendly", "hashimoto-friendly"],
        [
            ("Cottage cheese", 150, "g", 147, 17, 5, 6.5),
            ("Strawberries", 100, "g", 32, 0.7, 7.7, 0.3),
        ],
        ["Top cottage cheese with sliced strawberries."],
        2,
    ),
    _meal(
        "hummus-crudites", "Hummus with vegetable sticks", MealType.SNACK,
        [Diet.VEGETARIAN, Diet.MIXED],
        ["low-calorie", "high-fiber", "ir-friendly"],
        [
            ("Hummus", 60, "g", 100, 4.2, 8.5, 6),
            ("Carrot sticks", 100, "g", 41, 0.9, 9.6, 0.2),
            ("Cucumber", 100, "g", 15, 0.7, 3.6, 0.1),
        ],
        ["Cut the vegetables into sticks and dip."],
        5,
    ),
    _meal(
        "cheese-salami-plate", "Cheese and salami plate", MealType.SNACK,
        [Diet.KETO, Diet.CARNIVORE],
        ["high-calorie"],
        [
            ("Aged cheese", 30, "g", 121, 7.5, 0.4, 10),
            ("Salami", 25, "g", 100, 5.5, 0.4, 8.5),
        ],
        ["Slice and plate."],
        2,
    ),
    _meal(
        "boiled-eggs", "Two boiled eggs", MealType.SNACK,
        [Diet.CARNIVORE, Diet.KETO, Diet.VEGETARIAN, Diet.MIXED],
        ["high-protein", "low-calorie", "hashimoto-friendly"],
        [
            ("Eggs", 100, "g", 143, 12.6, 0.7, 9.5),
        ],
        ["Boil 8 minutes, cool in cold water, season with salt."],
        10,
    ),
    _meal(
        "rice-cakes-peanut-butter", "Rice cakes with peanut butter and banana", MealType.SNACK,
        [Diet.VEGETARIAN, Diet.MIXED],
        ["high-calorie", "post-workout"],
        [
            ("Rice cakes", 18, "g", 70, 1.4, 15, 0.5),
            ("Peanut butter", 15, "g", 88, 3.8, 3, 7.5),
            ("Banana", 60, "g", 53, 0.7, 13.7, 0.2),
        ],
        ["Spread peanut butter on the rice cakes and top with banana slices."],
        3,
    ),

    # =========================================================================
    # DESSERT
    # =========================================================================
    _meal(
        "dark-chocolate-raspberries", "Dark chocolate with raspberries", MealType.DESSERT,
        [Diet.VEGETARIAN, Diet.MIXED],
        ["low-calorie", "ir-friendly", "pcos-friendly"],
        [
            ("Dark chocolate 85%", 15, "g", 90, 1.5, 3.5, 7.5),
            ("Raspberries", 100, "g", 52, 1.2, 12, 0.7),
        ],
        ["Serve the raspberries with chocolate squares."],
        2,
    ),
    _meal(
        "cocoa-skyr-pudding", "Cocoa skyr pudding", MealType.DESSERT,
        [Diet.VEGETARIAN, Diet.MIXED],
        ["high-protein", "mid-calorie", "hashimoto-friendly"],
        [
            ("Skyr", 150, "g", 95, 16.5, 6, 0.3),
            ("Cocoa powder", 5, "g", 11, 1, 0.6, 0.7),
            ("Honey", 10, "g", 30, 0, 8, 0),
        ],
        ["Whisk skyr with cocoa and honey, chill 10 minutes."],
        3,
    ),
    _meal(
        "baked-cinnamon-apple", "Baked cinnamon apple with walnuts", MealType.DESSERT,
        [Diet.VEGETARIAN, Diet.MIXED],
        ["low-calorie", "high-fiber"],
        [
            ("Apple", 180, "g", 94, 0.5, 25, 0.3),
            ("Walnuts", 10, "g", 65, 1.5, 1.4, 6.5),
            ("Cinnamon", 2, "g", 5, 0.1, 1.6, 0),
        ],
        ["Core the apple, fill with walnuts and cinnamon, bake 25 minutes at 180 C."],
        30,
    ),
    _meal(
        "coconut-chia-pudding", "Coconut chia pudding", MealType.DESSERT,
        [Diet.KETO, Diet.VEGETARIAN],
        ["high-calorie"],
        [
            ("Chia seeds", 25, "g", 122, 4.2, 10.5, 7.7),
            ("Coconut milk", 60, "ml", 118, 1.2, 1.7, 12.7),
        ],
        ["Stir chia into coconut milk and refrigerate at least 2 hours."],
        5,
    ),
    _meal(
        "banana-nice-cream", "Banana nice cream", MealType.DESSERT,
        [Diet.VEGETARIAN, Diet.MIXED],
        ["high-calorie"],
        [
            ("Frozen banana", 150, "g", 134, 1.6, 34, 0.5),
            ("Peanut butter", 10, "g", 59, 2.5, 2, 5),
        ],
        ["Blend the frozen banana until creamy, swirl in the peanut butter."],
        5,
    ),
]


MEAL_SWAPS: List[MealSuggestion] = [
    MealSuggestion(id="swap-rice-cauliflower", title="Swap rice for cauliflower rice", icon="leaf-outline"),
    MealSuggestion(id="swap-bread-lettuce", title="Use lettuce wraps instead of bread", icon="nutrition-outline"),
    MealSuggestion(id="swap-dessert-fruit", title="Fresh fruit instead of dessert", icon="ice-cream-outline"),
    MealSuggestion(id="swap-soda-water", title="Sparkling water with lemon instead of soda", icon="water-outline"),
]
