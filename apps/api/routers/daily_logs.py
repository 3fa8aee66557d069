"""
Daily Logs API Router

Completion toggles and energy check-ins for a single day. The caller sends
the day's stored log (if any) and stores the returned one.
"""

from typing import Any, Dict, List, Optional
import logging

from fastapi import APIRouter
from pydantic import BaseModel, Field

from core.exceptions import ValidationError
from services.plan_engine.dates import parse_local_date
from services.plan_engine.models import DailyLog
from services.plan_state import CompletionKind, ensure_log, set_log_energy, toggle_log_item

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/logs", tags=["Daily Logs"])

ISO_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class DailyLogModel(BaseModel):
    date: str = Field(..., pattern=ISO_DATE_PATTERN)
    energy: Optional[int] = Field(None, ge=1, le=5)
    workouts_completed: List[str] = Field(default_factory=list)
    meals_completed: List[str] = Field(default_factory=list)
    habits_completed: List[str] = Field(default_factory=list)


class ToggleRequest(BaseModel):
    log: Optional[DailyLogModel] = None
    date: str = Field(..., pattern=ISO_DATE_PATTERN, description="Local date, YYYY-MM-DD")
    kind: CompletionKind
    item_id: str = Field(..., min_length=1)


class EnergyRequest(BaseModel):
    log: Optional[DailyLogModel] = None
    date: str = Field(..., pattern=ISO_DATE_PATTERN, description="Local date, YYYY-MM-DD")
    level: int


def _current_log(log: Optional[DailyLogModel], day: str) -> DailyLog:
    try:
        parse_local_date(day)
    except ValueError:
        raise ValidationError(f"Invalid date: {day}", field="date")
    if log is not None and log.date != day:
        raise ValidationError(f"Log is for {log.date}, not {day}", field="log")
    stored = {day: DailyLog.from_dict(log.model_dump())} if log is not None else {}
    return ensure_log(stored, day)


@router.post("/toggle", response_model=Dict[str, Any])
async def toggle(request: ToggleRequest):
    """Mark an item done, or undo it if it already was."""
    log = toggle_log_item(_current_log(request.log, request.date), request.kind, request.item_id)

    logger.info(
        f"{request.kind.value} toggle on {request.date}",
        extra={"extra_fields": {
            "event": f"{request.kind.value}_toggle",
            "date": request.date,
            "item_id": request.item_id,
        }},
    )
    return log.to_dict()


@router.post("/energy", response_model=Dict[str, Any])
async def energy(request: EnergyRequest):
    """Record the day's energy level (1-5)."""
    try:
        log = set_log_energy(_current_log(request.log, request.date), request.level)
    except ValueError as e:
        raise ValidationError(str(e), field="level")

    logger.info(
        f"Energy {request.level} logged for {request.date}",
        extra={"extra_fields": {"event": "energy_logged", "date": request.date, "energy_level": request.level}},
    )
    return log.to_dict()
