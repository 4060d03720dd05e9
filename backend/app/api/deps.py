from datetime import date
from typing import Optional

from fastapi import Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.time_utils import local_today
from app.crud.user import get_user
from app.db import get_db
from app.models.user import User


def get_path_user(user_id: int, db: Session = Depends(get_db)) -> User:
    """Resolve the `user_id` path parameter, 404 if nobody has that id."""
    user = get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def resolve_today(today: Optional[date] = Query(None)) -> date:
    """Reference day for progress figures.

    Clients may pin it (e.g. to render a past day); otherwise it is the
    current date in the configured timezone.
    """
    if today is not None:
        return today
    return local_today(settings.timezone)
