"""
Plans API Router

Stateless endpoints over the plan engine. The caller sends the state an
operation needs (profile, stored plan, logs) and stores what comes back.

Endpoints for:
- Generating or regenerating a plan
- Recording a profile edit in the plan's history
- Projecting the monthly calendar
"""

from datetime import date, datetime
from typing import Any, Dict, List, Literal, Optional
import logging

from fastapi import APIRouter
from pydantic import BaseModel, Field, field_validator, model_validator

from core.config import settings
from core.exceptions import PayloadError, ValidationError
from services.monthly_calendar import create_monthly_calendar
from services.plan_engine import PlanGenerator, UserProfile
from services.plan_engine.constants import (
    ActivityLevel,
    DietPreference,
    EquipmentLocation,
    Goal,
    HealthCondition,
)
from services.plan_engine.models import DailyLog, GeneratedPlan
from services.plan_state import append_profile_snapshot, normalize_plan, visible_profile_history

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/plans", tags=["Plans"])


# ============ Request Models ============

class EquipmentModel(BaseModel):
    location: EquipmentLocation
    items: List[str] = Field(default_factory=list)


class ProfileModel(BaseModel):
    """Onboarding answers."""
    age: int = Field(..., ge=14, le=100)
    height_cm: float = Field(..., ge=100, le=250)
    weight_kg: float = Field(..., ge=30, le=300)
    goal: Goal
    activity_level: ActivityLevel
    equipment: EquipmentModel
    days_per_week: Literal[2, 3, 4, 5] = Field(..., description="Training days per week")
    diet_preference: DietPreference
    allergies: List[str] = Field(default_factory=list)
    disliked_foods: List[str] = Field(default_factory=list)
    sleep_hours: float = Field(7.0, ge=0, le=24)
    stress_level: int = Field(3, ge=1, le=5)
    health_conditions: List[HealthCondition] = Field(default_factory=list)

    # Menstrual cycle (optional)
    cycle_length_days: Optional[int] = Field(None, ge=15, le=60)
    period_length_days: Optional[int] = Field(None, ge=1, le=15)
    last_period_date: Optional[str] = Field(None, description="YYYY-MM-DD")

    @field_validator("last_period_date")
    @classmethod
    def _valid_period_date(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        try:
            parsed = date.fromisoformat(value)
        except ValueError:
            parsed = None
        if parsed is None or parsed.isoformat() != value:
            raise ValueError("last_period_date must be a YYYY-MM-DD date")
        return value

    @model_validator(mode="after")
    def _period_within_cycle(self) -> "ProfileModel":
        if (
            self.cycle_length_days is not None
            and self.period_length_days is not None
            and self.period_length_days >= self.cycle_length_days
        ):
            raise ValueError("period_length_days must be shorter than cycle_length_days")
        return self

    def to_profile(self) -> UserProfile:
        return UserProfile.from_dict(self.model_dump(mode="json"))


class GeneratePlanRequest(BaseModel):
    profile: ProfileModel
    previous_plan: Optional[Dict[str, Any]] = Field(None, description="Stored plan being regenerated")
    reset_subscription: bool = Field(False, description="Start a fresh subscription window")
    today: Optional[date] = Field(None, description="Member's local date; a new window opens on it")


class ProfileUpdateRequest(BaseModel):
    plan: Dict[str, Any]
    profile: ProfileModel


class CalendarRequest(BaseModel):
    plan: Dict[str, Any]
    logs: Dict[str, Dict[str, Any]] = Field(default_factory=dict, description="Daily logs keyed by YYYY-MM-DD")
    today: Optional[date] = Field(None, description="Local date to treat as today")


# ============ Helpers ============

def _load_plan(payload: Dict[str, Any], field: str, profile: Optional[UserProfile] = None) -> GeneratedPlan:
    try:
        return normalize_plan(payload, profile)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise PayloadError("plan", field, e)


def _plan_response(plan: GeneratedPlan) -> Dict[str, Any]:
    data = plan.to_dict()
    data["visible_profile_history"] = [
        s.to_dict() for s in visible_profile_history(plan, settings.PROFILE_HISTORY_DISPLAY_LIMIT)
    ]
    return data


# ============ Endpoints ============

@router.post("/generate", response_model=Dict[str, Any])
async def generate(request: GeneratePlanRequest):
    """
    Generate a plan for the profile.

    With ``previous_plan`` the subscription window, tier and profile history
    carry over; ``reset_subscription`` opens a new window from today.
    """
    profile = request.profile.to_profile()
    previous = _load_plan(request.previous_plan, "previous_plan") if request.previous_plan else None

    generator = PlanGenerator(subscription_days=settings.SUBSCRIPTION_WINDOW_DAYS)
    try:
        plan = generator.generate(
            profile,
            previous_plan=previous,
            reset_subscription=request.reset_subscription,
            today=request.today,
        )
    except ValueError as e:
        raise ValidationError(str(e), field="profile")

    return _plan_response(plan)


@router.post("/profile", response_model=Dict[str, Any])
async def update_profile(request: ProfileUpdateRequest):
    """Record a profile edit: new snapshot, appended to history."""
    profile = request.profile.to_profile()
    plan = _load_plan(request.plan, "plan", profile)
    updated = append_profile_snapshot(plan, profile, datetime.now().astimezone())

    logger.info(
        f"Profile snapshot appended to plan {updated.id}",
        extra={"extra_fields": {"plan_id": updated.id, "history_length": len(updated.profile_history)}},
    )
    return _plan_response(updated)


@router.post("/calendar", response_model=Dict[str, Any])
async def calendar(request: CalendarRequest):
    """Monthly calendar for the plan's subscription window."""
    plan = _load_plan(request.plan, "plan")
    try:
        logs = {key: DailyLog.from_dict({"date": key, **value}) for key, value in request.logs.items()}
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise PayloadError("daily log", "logs", e)

    data = create_monthly_calendar(plan, logs, today=request.today)
    return data.to_dict()
