from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict


class EntryBase(BaseModel):
    date: date
    weight: float  # kilograms, e.g. 72.45
    notes: Optional[str] = None


class EntryCreate(EntryBase):
    """Schema for logging a new weight entry."""
    pass


class EntryUpdate(BaseModel):
    """Schema for updating an existing entry in place (all fields optional)."""

    model_config = ConfigDict(extra="ignore")

    # Accept date as string for updates to avoid strict parsing issues
    date: Optional[str] = None
    weight: Optional[float] = None
    notes: Optional[str] = None


class EntryRead(EntryBase):
    """Schema returned to the frontend when reading an entry."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
