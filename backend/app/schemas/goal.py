from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict


class WeightGoalBase(BaseModel):
    target_weight: float
    target_date: Optional[date] = None
    initial_weight: Optional[float] = None
    daily_goal: Optional[float] = None    # grams per day
    weekly_goal: Optional[float] = None   # kg per week
    monthly_goal: Optional[float] = None  # kg per month


class WeightGoalRead(WeightGoalBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int


class WeightGoalUpsert(WeightGoalBase):
    """Omitted initial weight and paces are filled in from current data on save."""
    pass
