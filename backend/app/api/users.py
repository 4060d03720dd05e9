import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.constants import MIN_PASSWORD_LENGTH, MIN_USERNAME_LENGTH
from app.crud.user import authenticate, create_user, get_user_by_username
from app.db import get_db
from app.schemas.user import UserCreate, UserLogin, UserRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/register", response_model=UserRead)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    username = payload.username.strip()
    if len(username) < MIN_USERNAME_LENGTH:
        raise HTTPException(
            status_code=422,
            detail=f"username must have at least {MIN_USERNAME_LENGTH} characters",
        )
    if len(payload.password) < MIN_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=422,
            detail=f"password must have at least {MIN_PASSWORD_LENGTH} characters",
        )

    if get_user_by_username(db, username):
        raise HTTPException(status_code=400, detail="User already exists")

    user = create_user(db, username, payload.password, payload.name)
    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return user


@router.post("/login", response_model=UserRead)
def login(payload: UserLogin, db: Session = Depends(get_db)):
    if not payload.username.strip() or not payload.password:
        raise HTTPException(status_code=422, detail="username and password are required")

    user = authenticate(db, payload.username, payload.password)
    if user is None:
        logger.warning("Failed login for %r", payload.username.strip())
        raise HTTPException(status_code=401, detail="Invalid username or password")
    return user
