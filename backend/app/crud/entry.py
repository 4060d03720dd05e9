from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from app.models.weight_entry import WeightEntry


def list_entries(
    db: Session,
    user_id: int,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    limit: Optional[int] = None,
) -> list[WeightEntry]:
    """Entries of one user, most recent first."""
    query = db.query(WeightEntry).filter(WeightEntry.user_id == user_id)
    if start_date is not None:
        query = query.filter(WeightEntry.date >= start_date)
    if end_date is not None:
        query = query.filter(WeightEntry.date <= end_date)
    query = query.order_by(WeightEntry.date.desc(), WeightEntry.id.desc())
    if limit:
        query = query.limit(limit)
    return query.all()


def get_entry(db: Session, user_id: int, entry_id: int) -> Optional[WeightEntry]:
    """One entry, only if it belongs to `user_id`."""
    return (
        db.query(WeightEntry)
        .filter(WeightEntry.id == entry_id, WeightEntry.user_id == user_id)
        .first()
    )


def create_entry(
    db: Session, user_id: int, weight: float, entry_date: date, notes: Optional[str] = None
) -> WeightEntry:
    entry = WeightEntry(user_id=user_id, weight=weight, date=entry_date, notes=notes or None)
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry


def update_entry(db: Session, entry: WeightEntry, changes: dict) -> WeightEntry:
    """Apply field changes to the row itself; the id stays the same."""
    for key, value in changes.items():
        setattr(entry, key, value)
    db.commit()
    db.refresh(entry)
    return entry


def delete_entry(db: Session, entry: WeightEntry) -> None:
    db.delete(entry)
    db.commit()
