"""
Profile builders shared by the plan engine and API tests.
"""
from datetime import datetime

from services.plan_engine.constants import (
    ActivityLevel,
    DietPreference,
    EquipmentLocation,
    Goal,
)
from services.plan_engine.models import Equipment, UserProfile


# Wednesday 5 March 2025, naive local time
FIXED_NOW = datetime(2025, 3, 5, 9, 30)


def make_profile(**overrides) -> UserProfile:
    """Reference profile (68 kg, 168 cm, 28 y, light, lose, 3 days, home)."""
    values = dict(
        age=28,
        height_cm=168,
        weight_kg=68,
        goal=Goal.LOSE,
        activity_level=ActivityLevel.LIGHT,
        equipment=Equipment(location=EquipmentLocation.HOME, items=("dumbbells", "bands")),
        days_per_week=3,
        diet_preference=DietPreference.OMNIVORE,
        allergies=(),
        disliked_foods=(),
        sleep_hours=7.5,
        stress_level=2,
        health_conditions=(),
    )
    values.update(overrides)
    return UserProfile(**values)


def profile_payload(**overrides) -> dict:
    """The reference profile as an API request body."""
    payload = {
        "age": 28,
        "height_cm": 168,
        "weight_kg": 68,
        "goal": "lose",
        "activity_level": "light",
        "equipment": {"location": "home", "items": ["dumbbells", "bands"]},
        "days_per_week": 3,
        "diet_preference": "omnivore",
        "allergies": [],
        "disliked_foods": [],
        "sleep_hours": 7.5,
        "stress_level": 2,
        "health_conditions": [],
    }
    payload.update(overrides)
    return payload
