import logging
import math
from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import get_path_user, resolve_today
from app.core.progress import current_weight, goal_projection
from app.crud.entry import list_entries
from app.crud.goal import delete_goal, get_goal, upsert_goal
from app.db import get_db
from app.models.user import User
from app.schemas.goal import WeightGoalRead, WeightGoalUpsert

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users/{user_id}/goal", tags=["goals"])


@router.get("", response_model=WeightGoalRead | None)
def get_user_goal(user: User = Depends(get_path_user), db: Session = Depends(get_db)):
    return get_goal(db, user.id)


@router.put("", response_model=WeightGoalRead)
def upsert_user_goal(
    payload: WeightGoalUpsert,
    user: User = Depends(get_path_user),
    today: date = Depends(resolve_today),
    db: Session = Depends(get_db),
):
    for name in ("target_weight", "initial_weight"):
        value = getattr(payload, name)
        if value is not None and (not math.isfinite(value) or value <= 0):
            raise HTTPException(status_code=422, detail=f"{name} must be > 0")
    for name in ("daily_goal", "weekly_goal", "monthly_goal"):
        value = getattr(payload, name)
        if value is not None and (not math.isfinite(value) or value < 0):
            raise HTTPException(status_code=422, detail=f"{name} must be >= 0")

    values = payload.model_dump()

    # Snapshot the starting weight and the pace needed from it, as of today.
    current = current_weight(list_entries(db, user.id), today)
    if values["initial_weight"] is None:
        values["initial_weight"] = current
    projection = goal_projection(current, payload, today)
    if projection is not None:
        if values["daily_goal"] is None:
            values["daily_goal"] = projection.daily_pace_grams
        if values["weekly_goal"] is None:
            values["weekly_goal"] = projection.weekly_pace_kg
        if values["monthly_goal"] is None:
            values["monthly_goal"] = projection.monthly_pace_kg

    row = upsert_goal(db, user.id, values)
    logger.info(
        "Saved goal for user %s: target %.2f kg by %s",
        user.id,
        row.target_weight,
        row.target_date or "no date",
    )
    return row


@router.delete("")
def delete_user_goal(user: User = Depends(get_path_user), db: Session = Depends(get_db)):
    row = get_goal(db, user.id)
    if not row:
        raise HTTPException(status_code=404, detail="Goal not set")
    delete_goal(db, row)
    logger.info("Deleted goal for user %s", user.id)
    return {"success": True}
