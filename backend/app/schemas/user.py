from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict


class UserCreate(BaseModel):
    username: str
    password: str
    name: Optional[str] = None


class UserLogin(BaseModel):
    username: str
    password: str


class UserRead(BaseModel):
    """Public view of a user; the password hash never leaves the server."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    name: Optional[str] = None
    created_at: Optional[datetime] = None
