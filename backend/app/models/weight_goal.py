from sqlalchemy import Column, Integer, Date, DateTime, Float, ForeignKey
from sqlalchemy.sql import func
from app.db import Base


class WeightGoal(Base):
    __tablename__ = "weight_goals"

    id = Column(Integer, primary_key=True, index=True)

    # One goal per user
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )

    target_weight = Column(Float, nullable=False)
    target_date = Column(Date, nullable=True)
    # Weight when the goal was saved
    initial_weight = Column(Float, nullable=True)

    # Pace snapshot taken at save time, not refreshed afterwards
    daily_goal = Column(Float, nullable=True)    # grams per day
    weekly_goal = Column(Float, nullable=True)   # kg per week
    monthly_goal = Column(Float, nullable=True)  # kg per month

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
