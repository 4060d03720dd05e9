"""Dump users, weight entries and goals to a JSON file.

Password hashes are left out. Usage:
    python scripts/export_data.py --out db-export.json
"""

import argparse
import json

from app.db import SessionLocal
from app.models.user import User
from app.models.weight_entry import WeightEntry
from app.models.weight_goal import WeightGoal
from app.schemas.entry import EntryRead
from app.schemas.goal import WeightGoalRead
from app.schemas.user import UserRead


def export_data(db) -> dict:
    return {
        "users": [
            UserRead.model_validate(u).model_dump(mode="json")
            for u in db.query(User).order_by(User.id).all()
        ],
        "weight_entries": [
            EntryRead.model_validate(e).model_dump(mode="json")
            for e in db.query(WeightEntry).order_by(WeightEntry.user_id, WeightEntry.date).all()
        ],
        "weight_goals": [
            WeightGoalRead.model_validate(g).model_dump(mode="json")
            for g in db.query(WeightGoal).order_by(WeightGoal.user_id).all()
        ],
    }


def main() -> None:
    ap = argparse.ArgumentParser(description="Export users, entries and goals to JSON")
    ap.add_argument("--out", default="db-export.json", help="Output file path")
    args = ap.parse_args()

    db = SessionLocal()
    try:
        data = export_data(db)
    finally:
        db.close()

    with open(args.out, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    print(f"Exported {len(data['weight_entries'])} entries to {args.out}")


if __name__ == "__main__":
    main()
