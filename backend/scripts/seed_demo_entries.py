from datetime import date, timedelta
import random

from app.db import Base, SessionLocal, engine
from app.crud.goal import upsert_goal
from app.crud.user import create_user, get_user_by_username
from app.models.weight_entry import WeightEntry
from app.models.weight_goal import WeightGoal  # noqa: F401  (register table)

DEMO_USERNAME = "demo"
DEMO_PASSWORD = "demo1234"


def get_or_create_demo_user(db):
    user = get_user_by_username(db, DEMO_USERNAME)
    if user is None:
        user = create_user(db, DEMO_USERNAME, DEMO_PASSWORD, name="Demo")
    return user


def clear_recent_entries(db, user_id: int, days: int = 120) -> None:
    """Delete the user's entries in the last N days so we can reseed cleanly."""
    cutoff = date.today() - timedelta(days=days)
    db.query(WeightEntry).filter(
        WeightEntry.user_id == user_id, WeightEntry.date >= cutoff
    ).delete()
    db.commit()


def seed_demo_entries(db, user_id: int, days: int = 90, start_weight: float = 82.0) -> float:
    """Insert one entry per day with a slow downward trend and daily noise.

    Skips roughly one day in seven, like a real log. Returns the last weight.
    """
    today = date.today()
    weight = start_weight
    entries = []

    for back in range(days, -1, -1):
        d = today - timedelta(days=back)
        weight += random.uniform(-0.35, 0.25)
        if random.random() < 1 / 7 and back != 0:
            continue
        entries.append(
            WeightEntry(user_id=user_id, date=d, weight=round(weight, 2), notes=None)
        )

    if entries:
        db.add_all(entries)
        db.commit()

    print(f"Seeded {len(entries)} demo entries")
    return weight


def main():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        user = get_or_create_demo_user(db)
        clear_recent_entries(db, user.id, days=150)
        last = seed_demo_entries(db, user.id)
        upsert_goal(
            db,
            user.id,
            {
                "target_weight": round(last - 6.0, 1),
                "target_date": date.today() + timedelta(days=120),
                "initial_weight": round(last, 2),
            },
        )
        print(f"Demo login: {DEMO_USERNAME} / {DEMO_PASSWORD}")
    finally:
        db.close()


if __name__ == "__main__":
    main()
