import logging
import math
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.deps import get_path_user
from app.core.config import settings
from app.crud.entry import create_entry, delete_entry, get_entry, list_entries, update_entry
from app.db import get_db
from app.models.user import User
from app.schemas.entry import EntryCreate, EntryRead, EntryUpdate

logger = logging.getLogger(__name__)

router = APIRouter(tags=["entries"])


def _check_weight(weight: float) -> None:
    if not math.isfinite(weight) or weight <= 0:
        raise HTTPException(status_code=422, detail="weight must be > 0")


@router.get("/users/{user_id}/entries", response_model=list[EntryRead])
def list_user_entries(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    limit: Optional[int] = Query(None, ge=1),
    user: User = Depends(get_path_user),
    db: Session = Depends(get_db),
):
    """
    List a user's entries, most recent first, optionally within [start_date, end_date].

      GET /users/1/entries?start_date=2025-01-06&end_date=2025-01-12
    """
    return list_entries(
        db,
        user.id,
        start_date=start_date,
        end_date=end_date,
        limit=limit or settings.entries_default_limit,
    )


@router.post("/users/{user_id}/entries", response_model=EntryRead)
def create_user_entry(
    payload: EntryCreate,
    user: User = Depends(get_path_user),
    db: Session = Depends(get_db),
):
    _check_weight(payload.weight)
    entry = create_entry(db, user.id, payload.weight, payload.date, payload.notes)
    logger.info("User %s logged %.2f kg on %s (entry %s)", user.id, entry.weight, entry.date, entry.id)
    return entry


@router.put("/users/{user_id}/entries/{entry_id}", response_model=EntryRead)
def update_user_entry(
    entry_id: int,
    payload: EntryUpdate,
    user: User = Depends(get_path_user),
    db: Session = Depends(get_db),
):
    entry = get_entry(db, user.id, entry_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Entry not found")

    update_data = payload.model_dump(exclude_unset=True)

    if "date" in update_data:
        try:
            update_data["date"] = date.fromisoformat(update_data["date"])
        except (TypeError, ValueError):
            raise HTTPException(status_code=422, detail="date must be in YYYY-MM-DD format")

    if "weight" in update_data:
        if update_data["weight"] is None:
            raise HTTPException(status_code=422, detail="weight must be > 0")
        _check_weight(update_data["weight"])

    entry = update_entry(db, entry, update_data)
    logger.info("Updated entry %s (%s)", entry.id, ", ".join(sorted(update_data)) or "no changes")
    return entry


@router.delete("/users/{user_id}/entries/{entry_id}")
def delete_user_entry(
    entry_id: int,
    user: User = Depends(get_path_user),
    db: Session = Depends(get_db),
):
    entry = get_entry(db, user.id, entry_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Entry not found")
    delete_entry(db, entry)
    logger.info("User %s deleted entry %s", user.id, entry_id)
    return {"success": True}
