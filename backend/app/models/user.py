from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from app.db import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    # Stored trimmed; lookups are case-insensitive (see crud.user)
    username = Column(String(64), nullable=False, unique=True, index=True)
    name = Column(String, nullable=True)

    # Salted hash only, never the password itself
    hashed_password = Column(String, nullable=False)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
