from typing import Optional

from sqlalchemy.orm import Session

from app.models.weight_goal import WeightGoal

GOAL_FIELDS = (
    "target_weight",
    "target_date",
    "initial_weight",
    "daily_goal",
    "weekly_goal",
    "monthly_goal",
)


def get_goal(db: Session, user_id: int) -> Optional[WeightGoal]:
    return db.query(WeightGoal).filter(WeightGoal.user_id == user_id).first()


def upsert_goal(db: Session, user_id: int, values: dict) -> WeightGoal:
    """Create the user's goal or replace every field of the existing one."""
    row = get_goal(db, user_id)
    if row is None:
        row = WeightGoal(user_id=user_id)
        db.add(row)
    for key in GOAL_FIELDS:
        setattr(row, key, values.get(key))
    db.commit()
    db.refresh(row)
    return row


def delete_goal(db: Session, goal: WeightGoal) -> None:
    db.delete(goal)
    db.commit()
