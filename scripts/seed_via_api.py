#!/usr/bin/env python3
"""
Seed a few weeks of weight entries and a goal through the Weight Tracker API.

Pattern: one weigh-in per day, losing ~0.5 kg per week with day-to-day
noise, skipping Sundays. The goal asks for another 5 kg in 12 weeks.

Usage examples:
  - Against a local backend:
      python scripts/seed_via_api.py --base-url http://localhost:8000
  - Custom user and history length:
      python scripts/seed_via_api.py --base-url http://localhost:8000 \
          --username maria --password s3cret --weeks 8
"""

from __future__ import annotations

import argparse
import datetime as dt
import random
import sys

try:
    import requests  # type: ignore
except ImportError:  # pragma: no cover
    print("This script requires the 'requests' package.\nInstall with: pip install requests", file=sys.stderr)
    raise


WEEKLY_LOSS_KG = 0.5


def round2(x: float) -> float:
    return round(x + 1e-9, 2)


def call(method: str, base_url: str, path: str, payload: dict | None = None) -> dict:
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    r = requests.request(method, url, json=payload, timeout=15)
    if r.status_code >= 300:
        raise RuntimeError(f"{method} {path} -> HTTP {r.status_code}: {r.text}")
    return r.json()


def ensure_user(base_url: str, username: str, password: str) -> int:
    try:
        user = call("POST", base_url, "users/register", {"username": username, "password": password})
    except RuntimeError:
        user = call("POST", base_url, "users/login", {"username": username, "password": password})
    return int(user["id"])


def seed_entries(base_url: str, user_id: int, start: dt.date, days: int, start_kg: float) -> float:
    weight = start_kg
    for i in range(days):
        day = start + dt.timedelta(days=i)
        weight -= WEEKLY_LOSS_KG / 7
        if day.weekday() == 6:
            continue
        noisy = round2(weight + random.uniform(-0.3, 0.3))
        call("POST", base_url, f"users/{user_id}/entries", {"date": day.isoformat(), "weight": noisy, "notes": "seed"})
    return weight


def main() -> None:
    ap = argparse.ArgumentParser(description="Seed weight entries and a goal")
    ap.add_argument("--base-url", required=True, help="API base URL (e.g., http://localhost:8000)")
    ap.add_argument("--username", default="seed")
    ap.add_argument("--password", default="seed1234")
    ap.add_argument("--weeks", type=int, default=12, help="Weeks of history ending today")
    ap.add_argument("--start-kg", type=float, default=85.0)
    args = ap.parse_args()

    today = dt.date.today()
    user_id = ensure_user(args.base_url, args.username, args.password)

    start = today - dt.timedelta(weeks=args.weeks) + dt.timedelta(days=1)
    days = (today - start).days + 1
    last = seed_entries(args.base_url, user_id, start, days, args.start_kg)

    call(
        "PUT",
        args.base_url,
        f"users/{user_id}/goal",
        {"target_weight": round2(last - 5.0), "target_date": (today + dt.timedelta(weeks=12)).isoformat()},
    )

    print(f"Seed complete: {args.weeks} weeks for user {args.username} (id={user_id}).")


if __name__ == "__main__":
    main()
