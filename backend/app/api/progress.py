from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import get_path_user, resolve_today
from app.core.progress import (
    build_daily_summary,
    build_goal_status,
    build_monthly_summary,
    build_weekly_summary,
)
from app.crud.entry import list_entries
from app.crud.goal import get_goal
from app.db import get_db
from app.models.user import User
from app.schemas.progress import (
    DailySummaryRead,
    GoalStatusRead,
    MonthlySummaryRead,
    WeeklySummaryRead,
)


router = APIRouter(prefix="/users/{user_id}/progress", tags=["progress"])


# Summaries are recomputed from fresh rows on every request; nothing is cached.

@router.get("/daily", response_model=DailySummaryRead)
def daily_progress(
    user: User = Depends(get_path_user),
    today: date = Depends(resolve_today),
    db: Session = Depends(get_db),
):
    return build_daily_summary(list_entries(db, user.id), get_goal(db, user.id), today)


@router.get("/weekly", response_model=WeeklySummaryRead)
def weekly_progress(
    user: User = Depends(get_path_user),
    today: date = Depends(resolve_today),
    db: Session = Depends(get_db),
):
    return build_weekly_summary(list_entries(db, user.id), get_goal(db, user.id), today)


@router.get("/monthly", response_model=MonthlySummaryRead)
def monthly_progress(
    user: User = Depends(get_path_user),
    today: date = Depends(resolve_today),
    db: Session = Depends(get_db),
):
    return build_monthly_summary(list_entries(db, user.id), get_goal(db, user.id), today)


@router.get("/goal", response_model=GoalStatusRead)
def goal_progress(
    user: User = Depends(get_path_user),
    today: date = Depends(resolve_today),
    db: Session = Depends(get_db),
):
    status = build_goal_status(list_entries(db, user.id), get_goal(db, user.id), today)
    if status is None:
        raise HTTPException(status_code=404, detail="Goal not set")
    return status
