from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.security import get_password_hash, verify_password
from app.models.user import User


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    name = username.strip().lower()
    return db.query(User).filter(func.lower(User.username) == name).first()


def create_user(db: Session, username: str, password: str, name: Optional[str] = None) -> User:
    username = username.strip()
    user = User(
        username=username,
        name=(name or username).strip(),
        hashed_password=get_password_hash(password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def authenticate(db: Session, username: str, password: str) -> Optional[User]:
    """Return the user when the password matches its stored hash."""
    user = get_user_by_username(db, username)
    if user is None or not verify_password(password, user.hashed_password):
        return None
    return user
